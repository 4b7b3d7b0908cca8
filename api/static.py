"""Static serving of uploaded images."""

import os

from fastapi.staticfiles import StaticFiles


class UploadStaticFiles(StaticFiles):
    """StaticFiles over a directory that may not exist until the first upload.

    A missing directory serves 404s instead of failing the config check.
    """

    def __init__(self, directory: str):
        super().__init__(directory=directory, check_dir=False)

    async def check_config(self) -> None:
        if self.directory is not None and not os.path.isdir(self.directory):
            return
        await super().check_config()
