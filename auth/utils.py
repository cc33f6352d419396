import base64
import hashlib
import uuid

import bcrypt


def _prehash(password: str) -> bytes:
    # bcrypt принимает не более 72 байт; digest sha256 в base64 занимает 44
    return base64.b64encode(hashlib.sha256(password.encode()).digest())


def get_password_hash(password: str) -> str:
    """Генерация хеша пароля"""
    return bcrypt.hashpw(_prehash(password), bcrypt.gensalt()).decode()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Проверка пароля"""
    return bcrypt.checkpw(_prehash(plain_password), hashed_password.encode())


def generate_token() -> str:
    """Непрозрачный токен сессии: случайная строка без полезной нагрузки"""
    return str(uuid.uuid4())
