from secdoc.exceptions import SecdocError


class UploadRejectedError(SecdocError):
    """Raised when an upload fails boundary checks. ``problems`` lists each one."""

    code = "upload_rejected"

    def __init__(self, problems: list[str]) -> None:
        super().__init__(f"File validation failed: {', '.join(problems)}")
        self.problems = problems
