from bundlegate.core.formulae.abc import FormulaMetadataStore
from bundlegate.core.formulae.fake import FakeFormulaMetadataStore
from bundlegate.core.formulae.real import RealFormulaMetadataStore
from bundlegate.core.formulae.types import FormulaInfo

__all__ = [
    "FakeFormulaMetadataStore",
    "FormulaInfo",
    "FormulaMetadataStore",
    "RealFormulaMetadataStore",
]
