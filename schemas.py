# Di dalam file: schemas.py

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# --- Enum dasar ---
class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class RelativeType(str, Enum):
    # ushul (ancestors)
    FATHER = "father"
    MOTHER = "mother"
    GRANDFATHER = "grandfather"
    GRANDMOTHER = "grandmother"
    # spouse
    HUSBAND = "husband"
    WIFE = "wife"
    # furu' (descendants)
    SON = "son"
    DAUGHTER = "daughter"
    GRANDSON = "grandson"              # son's son
    GRANDDAUGHTER = "granddaughter"    # son's daughter
    # siblings
    FULL_BROTHER = "full_brother"
    FULL_SISTER = "full_sister"
    PATERNAL_BROTHER = "paternal_brother"
    PATERNAL_SISTER = "paternal_sister"
    MATERNAL_BROTHER = "maternal_brother"
    MATERNAL_SISTER = "maternal_sister"
    # distant agnates
    FULL_NEPHEW = "full_nephew"            # full brother's son
    PATERNAL_NEPHEW = "paternal_nephew"    # paternal brother's son
    FULL_UNCLE = "full_uncle"              # father's full brother
    PATERNAL_UNCLE = "paternal_uncle"      # father's paternal brother
    FULL_COUSIN = "full_cousin"            # full uncle's son
    PATERNAL_COUSIN = "paternal_cousin"    # paternal uncle's son


class ShareKind(str, Enum):
    FARD = "fard"
    ASABAH = "asabah"


class DistributionStatus(str, Enum):
    ADIL = "adil"
    AWL = "awl"
    RADD = "radd"
    UNALLOCATED = "unallocated"


class _CamelModel(BaseModel):
    """Terima camelCase (klien JS) maupun snake_case."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Skema Katalog Kerabat (Database) ---
class RelativeBase(_CamelModel):
    key: RelativeType
    name_en: str
    name_ar: str
    gender: Gender


class RelativeCreate(RelativeBase):
    pass


class Relative(RelativeBase):
    id: int
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


# --- Skema Input untuk Kalkulasi ---
class HeirInput(_CamelModel):
    type: RelativeType
    count: int = Field(default=1, ge=0)


class CalculationInput(_CamelModel):
    deceased_gender: Gender
    heirs: List[HeirInput] = Field(default_factory=list)
    total_wealth: float = Field(ge=0, allow_inf_nan=False)  # harta bersih (sudah dikurangi hutang & wasiat)


# --- Snapshot kelayakan (dibangun sekali setelah hajb) ---
class Eligibility(BaseModel):
    model_config = ConfigDict(frozen=True)

    has_son: bool
    has_daughter: bool
    has_grandson: bool
    has_granddaughter: bool
    has_father: bool
    has_mother: bool
    has_grandfather: bool
    has_husband: bool
    has_wife: bool
    has_full_brother: bool
    has_paternal_brother: bool
    daughter_count: int
    full_sister_count: int
    # diambil dari tabel SEBELUM hajb: saudara yang mahjub tetap mengurangi bagian ibu
    sibling_count: int

    @property
    def has_male_descendant(self) -> bool:
        return self.has_son or self.has_grandson

    @property
    def has_female_descendant(self) -> bool:
        return self.has_daughter or self.has_granddaughter

    @property
    def has_descendant(self) -> bool:
        return self.has_male_descendant or self.has_female_descendant

    @property
    def has_spouse(self) -> bool:
        return self.has_husband or self.has_wife


# --- Bagian internal per kategori (akumulator) ---
class ShareAssignment(BaseModel):
    relative_type: RelativeType
    kind: ShareKind
    fixed: float = 0.0          # bagian furudh
    residuary: float = 0.0      # tambahan dari sisa (ashobah)
    rationale_key: str
    rationale: str
    radd_applied: bool = False

    @property
    def fraction(self) -> float:
        return self.fixed + self.residuary


# --- Skema Output untuk Setiap Ahli Waris ---
class ShareResult(_CamelModel):
    relative_type: RelativeType
    fraction: float
    share_fraction: str          # pecahan tampilan, misal "3/4"
    saham: int                   # pembilang terhadap ashlul mas'alah
    monetary_amount: float
    amount_each: float           # nominal per orang (dibagi count)
    percentage: float
    count: int
    rationale: str
    rationale_key: str
    radd_applied: bool = Field(False, alias="raddFlag")


# --- Skema Output Utama ---
class CalculationResult(_CamelModel):
    total_wealth: float
    status: DistributionStatus
    ashlul_masalah: int
    total_fraction: float
    total_distributed: float
    unallocated_fraction: float
    unallocated_amount: float
    notes: List[str]
    shares: List[ShareResult]
