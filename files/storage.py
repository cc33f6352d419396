import uuid
from pathlib import Path
from typing import Optional

from fastapi import Depends

from config.context import AppContext, get_context


class ContentStore:
    """Содержимое файлов на диске: <base>/<uuid>, миниатюры <base>/<uuid>_<size>"""

    def __init__(self, base_dir):
        self.base_dir = Path(base_dir)

    def write(self, data: bytes) -> str:
        # Повторное создание папки при параллельных загрузках безопасно
        self.base_dir.mkdir(exist_ok=True, parents=True)
        file_path = self.base_dir / str(uuid.uuid4())
        with open(file_path, "wb") as f:
            f.write(data)
        return str(file_path)

    @staticmethod
    def variant_path(local_path: str, size: Optional[str] = None) -> Path:
        if size:
            return Path(f"{local_path}_{size}")
        return Path(local_path)

    def locate(self, local_path: str, size: Optional[str] = None) -> Optional[Path]:
        """Путь к содержимому (или его варианту), если это существующий файл"""
        file_path = self.variant_path(local_path, size)
        try:
            if not file_path.is_file():
                return None
        except OSError:
            # например, слишком длинное имя варианта
            return None
        return file_path.resolve()


def get_content_store(context: AppContext = Depends(get_context)) -> ContentStore:
    return ContentStore(context.settings.FOLDER_PATH)
