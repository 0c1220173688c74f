"""Administrative-rights check handed to the controllers."""

import os


class PrivilegeChecker:
    """Answers whether the current process runs with administrative rights.

    POSIX: effective uid 0. Windows: shell32 ``IsUserAnAdmin``.
    """

    def is_admin(self) -> bool:
        if os.name == "nt":
            import ctypes

            try:
                return bool(ctypes.windll.shell32.IsUserAnAdmin())  # type: ignore[attr-defined]
            except (AttributeError, OSError):
                return False
        return os.geteuid() == 0
