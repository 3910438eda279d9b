# SPDX-License-Identifier: MIT

import structlog

from keeper import configuration
from keeper.version.git import Git

logger = structlog.get_logger(__name__)


class Version:
    def __init__(self) -> None:
        self.git = Git()

    def initialize_data_versioning(self) -> None:
        if not self.git.is_git_repo(configuration.DATA_PATH):
            self.git.init(configuration.DATA_PATH)
            logger.debug("data versioning initialized", path=str(configuration.DATA_PATH))

    def create_data_checkpoint(self, message: str) -> None:
        if self.git.is_git_repo(configuration.DATA_PATH):
            self.git.update(configuration.DATA_PATH, message)
            logger.debug("data checkpoint created", message=message)

    def get_history(self, limit: int) -> list[str]:
        if not self.git.is_git_repo(configuration.DATA_PATH):
            return []
        return self.git.log(configuration.DATA_PATH, limit)
