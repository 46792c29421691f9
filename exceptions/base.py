"""
Root of the storefront error hierarchy.

Every error raised by the data-access layer names the operation that failed
(the same title the user sees in the toast) next to the backend's message.
Subclasses pin their own status code.
"""


class StorefrontException(Exception):
    status_code: int | None = None

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.details = {}
        if self.status_code is not None:
            self.details['status_code'] = self.status_code
        if operation:
            self.details['operation'] = operation

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        parts = [repr(self.message)] + [f"{k}={v}" for k, v in self.details.items()]
        return f"{self.__class__.__name__}({', '.join(parts)})"
