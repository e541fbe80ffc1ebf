"""Abstract base class for formula metadata lookups."""

from abc import ABC, abstractmethod

from bundlegate.core.formulae.types import FormulaInfo


class FormulaMetadataStore(ABC):
    """Abstract interface for looking up formula metadata.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def formula_by_full_name(self, name: str) -> FormulaInfo | None:
        """Look up a formula by name.

        Args:
            name: Formula name or tap-qualified full name

        Returns:
            FormulaInfo for the formula, or None if it is unknown or the
            lookup failed for any reason
        """
        ...
