# SPDX-License-Identifier: MIT

import shutil
import subprocess
from enum import Enum
from pathlib import Path
from typing import Optional


class VersionControlError(Exception):
    pass


class GitCommand(Enum):
    TOPLEVEL = 0
    INIT = 1
    UPDATE = 2
    LOG = 3


class Git:
    def is_git_repo(self, folder: Path) -> bool:
        self.__fail_if_git_not_available()
        results = self.__execute_git_command(GitCommand.TOPLEVEL, folder)
        final_result = results[-1].strip()
        if final_result == "" or final_result.startswith("fatal:"):
            return False
        # A folder nested in some other repository is not versioned on its own
        return Path(final_result).resolve() == folder.resolve()

    def init(self, folder: Path) -> None:
        self.__fail_if_git_not_available()
        self.__execute_git_command(GitCommand.INIT, folder)

    def update(self, folder: Path, message: str) -> None:
        self.__fail_if_git_not_available()
        self.__execute_git_command(GitCommand.UPDATE, folder, message=message)

    def log(self, folder: Path, limit: int) -> list[str]:
        self.__fail_if_git_not_available()
        results = self.__execute_git_command(GitCommand.LOG, folder, limit=limit)
        final_result = results[-1]
        # A repository without commits has no log
        if final_result.startswith("fatal:"):
            return []
        return [line for line in final_result.splitlines() if line.strip()]

    def __fail_if_git_not_available(self) -> None:
        git_available = shutil.which("git")
        if git_available is None:
            raise VersionControlError("Git is not available on the system")

    def __execute_git_command(
        self,
        command: GitCommand,
        folder: Path,
        message: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[str]:
        git_commands: list[list[str]] = [
            ["git", "-C", str(folder.resolve())],
        ]

        match command:
            case GitCommand.TOPLEVEL:
                git_commands[0] += ["rev-parse", "--show-toplevel"]
            case GitCommand.INIT:
                git_commands[0].append("init")
            case GitCommand.UPDATE:
                commit_message = message or ""
                git_commands[0] += ["add", "-vA", "--", "."]
                git_commands.append(
                    [
                        "git",
                        "-C",
                        str(folder.resolve()),
                        "commit",
                        "--allow-empty-message",
                        "-m",
                        commit_message,
                    ]
                )
            case GitCommand.LOG:
                git_commands[0] += [
                    "log",
                    f"--max-count={limit or 10}",
                    "--format=%h %ad %s",
                    "--date=format:%Y-%m-%d %H:%M",
                    "--",
                    ".",
                ]

        results = []

        for git_command in git_commands:
            result = subprocess.run(git_command, text=True, capture_output=True)
            result_str = result.stdout + result.stderr
            results.append(result_str)

        return results
