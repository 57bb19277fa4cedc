from dataclasses import dataclass


@dataclass(frozen=True)
class InvocationResult:
    success: bool
    message: str  # confirmation text or error description

    @classmethod
    def ok(cls, message: str) -> "InvocationResult":
        return cls(success=True, message=message)

    @classmethod
    def error(cls, message: str) -> "InvocationResult":
        return cls(success=False, message=message)
