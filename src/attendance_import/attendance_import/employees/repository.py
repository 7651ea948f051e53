from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeDirectory(Protocol):
    """Giao diện repository cho danh bạ nhân viên (chỉ đọc).

    Lưu ý (DIP): tầng service phụ thuộc vào interface này, không phụ thuộc trực tiếp DB cụ thể.
    """

    def list_active(self) -> Sequence[Employee]:
        raise NotImplementedError
