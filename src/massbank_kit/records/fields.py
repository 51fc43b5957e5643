# src/massbank_kit/records/fields.py

"""Catalog of the MassBank record fields this package understands.

The order of ``FIELDS`` is the serialization order. Dispatchers, the
serializer and the unrecognized-field rule all read from here so the
three never drift apart.
"""

from dataclasses import dataclass
from enum import Enum


class Namespace(str, Enum):
    """Key prefix grouping a field into one section of the record."""

    HEADER = ""
    COMPOUND = "CH$"
    SPECIES = "SP$"
    ANALYTICAL = "AC$"
    MASS_SPECTROMETRY = "MS$"
    PEAK = "PK$"


@dataclass(frozen=True)
class FieldSpec:
    key: str
    attr: str
    namespace: Namespace
    repeated: bool = False
    table: bool = False


PEAK_TABLE_KEY = "PK$PEAK"
ANNOTATION_TABLE_KEY = "PK$ANNOTATION"
NUM_PEAK_KEY = "PK$NUM_PEAK"

TERMINATOR = "//"

DEFAULT_ANNOTATION_HEADER = "m/z annotation exact_mass error(ppm)"
PEAK_TABLE_HEADER = "m/z int. rel.int."

FIELDS: tuple[FieldSpec, ...] = (
    # Header
    FieldSpec("ACCESSION", "accession", Namespace.HEADER),
    FieldSpec("DEPRECATED", "deprecated", Namespace.HEADER),
    FieldSpec("RECORD_TITLE", "record_title", Namespace.HEADER),
    FieldSpec("DATE", "date", Namespace.HEADER),
    FieldSpec("AUTHORS", "authors", Namespace.HEADER),
    FieldSpec("LICENSE", "license", Namespace.HEADER),
    FieldSpec("COPYRIGHT", "copyright", Namespace.HEADER),
    FieldSpec("PUBLICATION", "publication", Namespace.HEADER),
    FieldSpec("PROJECT", "project", Namespace.HEADER),
    FieldSpec("COMMENT", "comment", Namespace.HEADER, repeated=True),
    # Compound
    FieldSpec("CH$NAME", "ch_name", Namespace.COMPOUND, repeated=True),
    FieldSpec("CH$COMPOUND_CLASS", "ch_compound_class", Namespace.COMPOUND),
    FieldSpec("CH$FORMULA", "ch_formula", Namespace.COMPOUND),
    FieldSpec("CH$EXACT_MASS", "ch_exact_mass", Namespace.COMPOUND),
    FieldSpec("CH$SMILES", "ch_smiles", Namespace.COMPOUND),
    FieldSpec("CH$IUPAC", "ch_iupac", Namespace.COMPOUND),
    FieldSpec("CH$LINK", "ch_link", Namespace.COMPOUND, repeated=True),
    # Species
    FieldSpec("SP$SCIENTIFIC_NAME", "sp_scientific_name", Namespace.SPECIES),
    FieldSpec("SP$LINEAGE", "sp_lineage", Namespace.SPECIES),
    FieldSpec("SP$LINK", "sp_link", Namespace.SPECIES, repeated=True),
    FieldSpec("SP$SAMPLE", "sp_sample", Namespace.SPECIES),
    # Analytical conditions
    FieldSpec("AC$INSTRUMENT", "ac_instrument", Namespace.ANALYTICAL),
    FieldSpec("AC$INSTRUMENT_TYPE", "ac_instrument_type", Namespace.ANALYTICAL),
    FieldSpec(
        "AC$MASS_SPECTROMETRY",
        "ac_mass_spectrometry",
        Namespace.ANALYTICAL,
        repeated=True,
    ),
    FieldSpec(
        "AC$CHROMATOGRAPHY", "ac_chromatography", Namespace.ANALYTICAL, repeated=True
    ),
    # Mass spectrometry
    FieldSpec(
        "MS$FOCUSED_ION", "ms_focused_ion", Namespace.MASS_SPECTROMETRY, repeated=True
    ),
    FieldSpec(
        "MS$DATA_PROCESSING",
        "ms_data_processing",
        Namespace.MASS_SPECTROMETRY,
        repeated=True,
    ),
    # Peak
    FieldSpec("PK$SPLASH", "pk_splash", Namespace.PEAK),
    FieldSpec(ANNOTATION_TABLE_KEY, "pk_annotation", Namespace.PEAK, table=True),
    FieldSpec(NUM_PEAK_KEY, "pk_num_peak", Namespace.PEAK),
    FieldSpec(PEAK_TABLE_KEY, "pk_peak", Namespace.PEAK, table=True),
)

FIELDS_BY_KEY: dict[str, FieldSpec] = {spec.key: spec for spec in FIELDS}

RECOGNIZED_KEYS: frozenset[str] = frozenset(FIELDS_BY_KEY)


def fields_in(namespace: Namespace) -> tuple[FieldSpec, ...]:
    return tuple(spec for spec in FIELDS if spec.namespace is namespace)
