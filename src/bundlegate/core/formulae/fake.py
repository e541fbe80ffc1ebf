"""Fake formula metadata store for testing."""

from bundlegate.core.formulae.abc import FormulaMetadataStore
from bundlegate.core.formulae.types import FormulaInfo


class FakeFormulaMetadataStore(FormulaMetadataStore):
    """In-memory fake returning pre-configured formulae.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(self, *, formulae: dict[str, FormulaInfo] | None = None) -> None:
        """Create FakeFormulaMetadataStore.

        Args:
            formulae: Mapping of name to FormulaInfo. Names not present look up as None.
        """
        self._formulae = formulae or {}
        self._lookups: list[str] = []

    @property
    def lookups(self) -> list[str]:
        """Names passed to formula_by_full_name(), in call order.

        This property is for test assertions only.
        """
        return self._lookups

    def formula_by_full_name(self, name: str) -> FormulaInfo | None:
        self._lookups.append(name)
        return self._formulae.get(name)
