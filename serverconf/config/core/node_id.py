"""
Node ID file validation.

The node ID file persists the unique identifier of a server node across
restarts. At startup the process must either be able to read an existing
identifier or to create and write a new one.
"""

import os
import stat
from pathlib import Path
from typing import List, Optional

from .validator import Validator, ValidationError


class NodeIdFileValidator(Validator):
    """
    Checks that a node ID file can be read, or created and written.

    Outcome by filesystem state:
      - missing: valid if the parent directory accepts new files
      - existing, unreadable: invalid
      - existing, readable and writable: valid
      - existing, readable, read-only: valid only if the file is non-empty
    """

    def validate(self, name: str, value: Optional[str]) -> None:
        if value is None:
            return

        problems = self._find_problems(Path(value))
        if problems:
            raise ValidationError(
                f"Invalid node ID file for parameter {name}: " + "; ".join(problems),
                field=name
            )

    def _find_problems(self, path: Path) -> List[str]:
        try:
            st = os.stat(path)
        except FileNotFoundError:
            return self._check_parent(path)
        except (OSError, ValueError) as e:
            # ValueError covers paths the OS cannot represent, e.g. embedded NUL
            return [f"Unable to access node ID file at {path}: {getattr(e, 'strerror', None) or e}"]

        if stat.S_ISDIR(st.st_mode):
            return [f"Path {path} is a directory"]

        problems = []
        if not _has_access(path, os.R_OK):
            problems.append(f"Node ID file at {path} is not readable")

        if st.st_size == 0 and not _has_access(path, os.W_OK):
            problems.append(f"The empty node ID file at {path} is not writable")

        return problems

    @staticmethod
    def _check_parent(path: Path) -> List[str]:
        parent = path.absolute().parent
        try:
            parent_st = os.stat(parent)
        except (OSError, ValueError):
            return [f"Parent path {parent} for node ID file at {path} does not exist"]

        if not stat.S_ISDIR(parent_st.st_mode):
            return [f"Parent path {parent} for node ID file at {path} is not a directory"]

        # Creating an entry needs write and search permission on the directory
        problems = []
        if not _has_access(parent, os.W_OK):
            problems.append(f"Parent directory {parent} for node ID file at {path} is not writable")
        if not _has_access(parent, os.X_OK):
            problems.append(f"Parent directory {parent} for node ID file at {path} is not searchable")

        return problems


def _has_access(path: Path, mode: int) -> bool:
    try:
        return os.access(path, mode)
    except (OSError, ValueError):
        return False
