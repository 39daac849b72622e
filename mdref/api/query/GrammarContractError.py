"""Grammar contract error (UNO: single class)."""


class GrammarContractError(RuntimeError):
    """A grammar matched without a capture group its construction guarantees.

    This is a programming defect in the grammar definitions, not a user-facing
    condition, and is never handled inside the library.
    """
