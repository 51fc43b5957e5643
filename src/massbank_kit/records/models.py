# src/massbank_kit/records/models.py

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .fields import FIELDS_BY_KEY


@dataclass(frozen=True)
class PeakText:
    """Verbatim source tokens of one peak row."""

    mz: str
    intensity: str
    relative_intensity: str


@dataclass(frozen=True)
class Peak:
    """One row of the ``PK$PEAK`` table.

    The numeric values and the source tokens are both kept. When
    ``original`` is set the serializer writes it back instead of
    reformatting the floats.
    """

    mz: float
    intensity: float
    relative_intensity: float = 0.0
    original: PeakText | None = None


@dataclass(frozen=True)
class Annotation:
    """One row of the ``PK$ANNOTATION`` table."""

    mz: float
    label: str | None = None
    exact_mass: float | None = None
    error_ppm: float | None = None
    original: str | None = None  # Trimmed source row


@dataclass(frozen=True)
class Record:
    """A parsed MassBank record.

    Immutable. Built once per parse by ``RecordBuilder``.
    """

    accession: str

    # Header
    deprecated: str | None = None
    record_title: str | None = None
    date: str | None = None
    authors: str | None = None
    license: str | None = None
    copyright: str | None = None
    publication: str | None = None
    project: str | None = None
    comment: tuple[str, ...] = ()

    # CH$
    ch_name: tuple[str, ...] = ()
    ch_compound_class: str | None = None
    ch_formula: str | None = None
    ch_exact_mass: str | None = None
    ch_smiles: str | None = None
    ch_iupac: str | None = None
    ch_link: tuple[str, ...] = ()

    # SP$
    sp_scientific_name: str | None = None
    sp_lineage: str | None = None
    sp_link: tuple[str, ...] = ()
    sp_sample: str | None = None

    # AC$
    ac_instrument: str | None = None
    ac_instrument_type: str | None = None
    ac_mass_spectrometry: tuple[str, ...] = ()
    ac_chromatography: tuple[str, ...] = ()

    # MS$
    ms_focused_ion: tuple[str, ...] = ()
    ms_data_processing: tuple[str, ...] = ()

    # PK$
    pk_splash: str | None = None
    pk_num_peak: int | None = None
    pk_peak: tuple[Peak, ...] = ()
    pk_annotation: tuple[Annotation, ...] = ()
    pk_annotation_header: str | None = None  # Header suffix as written in the source

    def get(self, key: str) -> Any:
        """Look a field up by its wire name, e.g. ``"CH$NAME"``."""
        try:
            spec = FIELDS_BY_KEY[key]
        except KeyError:
            raise KeyError(f"Unknown field '{key}'") from None
        return getattr(self, spec.attr)


class RecordBuilder:
    """Mutable accumulator filled in by the field and table parsers."""

    def __init__(self) -> None:
        self._scalars: dict[str, Any] = {}
        self._lists: dict[str, list[str]] = {}
        self._peaks: list[Peak] = []
        self._annotations: list[Annotation] = []
        self._annotation_header: str | None = None

    @property
    def accession(self) -> str:
        return self._scalars.get("accession") or ""

    def set_value(self, key: str, value: Any) -> None:
        spec = FIELDS_BY_KEY[key]
        if spec.repeated or spec.table:
            raise ValueError(f"Field '{key}' is not single-valued")
        self._scalars[spec.attr] = value

    def append_value(self, key: str, value: str) -> None:
        spec = FIELDS_BY_KEY[key]
        if not spec.repeated:
            raise ValueError(f"Field '{key}' is not repeated")
        self._lists.setdefault(spec.attr, []).append(value)

    def set_peaks(self, peaks: Iterable[Peak]) -> None:
        self._peaks = list(peaks)

    def set_annotations(
        self, annotations: Iterable[Annotation], header: str | None = None
    ) -> None:
        self._annotations = list(annotations)
        if header is not None:
            self._annotation_header = header

    def build(self) -> Record:
        kwargs: dict[str, Any] = dict(self._scalars)
        kwargs["accession"] = self.accession
        for attr, values in self._lists.items():
            kwargs[attr] = tuple(values)
        return Record(
            **kwargs,
            pk_peak=tuple(self._peaks),
            pk_annotation=tuple(self._annotations),
            pk_annotation_header=self._annotation_header,
        )
