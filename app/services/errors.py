from pathlib import Path


class DatasetError(Exception):
    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class DatasetIOError(DatasetError):
    pass


class DatasetFormatError(DatasetError):
    pass
