"""
Data models for the CSV QA pipeline
"""
from dataclasses import dataclass, field
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, model_validator

DataType = Literal["string", "number", "date", "boolean", "mixed", "empty"]

MODALITIES = ("clinical", "wearable", "neuropsychological", "mri", "genomic")


class NumericStats(BaseModel):
    """Distribution of a numeric column"""
    min: float
    max: float
    mean: float
    median: float
    stdDev: float

    class Config:
        frozen = True


class StringStats(BaseModel):
    """Length distribution of a free-text column"""
    minLength: int
    maxLength: int
    avgLength: float

    class Config:
        frozen = True


class _ColumnProfileBase(BaseModel):
    name: str
    index: int
    uniqueValues: int
    missingValues: int
    missingPercentage: float
    sampleValues: List[str] = []

    class Config:
        frozen = True


class NumberColumnProfile(_ColumnProfileBase):
    """Profile of a column inferred as numeric"""
    dataType: Literal["number"] = "number"
    numericStats: Optional[NumericStats] = None


class StringColumnProfile(_ColumnProfileBase):
    """Profile of a column inferred as free text"""
    dataType: Literal["string"] = "string"
    stringStats: Optional[StringStats] = None


class PlainColumnProfile(_ColumnProfileBase):
    """Profile of a column that carries no type-specific statistics"""
    dataType: Literal["date", "boolean", "mixed", "empty"]


ColumnProfile = Annotated[
    Union[NumberColumnProfile, StringColumnProfile, PlainColumnProfile],
    Field(discriminator="dataType"),
]


class QaSummary(BaseModel):
    """Row-level summary figures"""
    emptyRows: int = 0
    completeRows: int = 0
    averageFieldLength: float = 0.0

    class Config:
        frozen = True


class QaReport(BaseModel):
    """Complete QA report for one analysed file"""

    # File-level metrics
    fileName: str
    fileSize: int
    encoding: str
    fileType: Optional[str] = None

    # Structure metrics
    totalRows: int
    totalColumns: int
    columnNames: List[str]
    delimiter: str
    hasHeader: bool

    # Data quality metrics
    missingValuesCount: int
    missingValuesByColumn: Dict[str, int]
    missingValuesPercentage: float
    duplicateRowsCount: int
    duplicateRowsPercentage: float

    # Column-level metrics
    columnMetrics: List[ColumnProfile]

    # Validation results
    isValid: bool
    errors: List[str]
    warnings: List[str]

    summary: QaSummary
    analyzedAt: str

    class Config:
        frozen = True

    @model_validator(mode="after")
    def _validity_follows_errors(self) -> 'QaReport':
        if self.isValid != (len(self.errors) == 0):
            raise ValueError("isValid must be true exactly when there are no errors")
        return self

    def to_json(self) -> str:
        """Serialize the report for storage alongside an upload record"""
        return self.model_dump_json()

    @classmethod
    def from_json(cls, data: Union[str, bytes]) -> 'QaReport':
        """Rebuild a report previously produced by ``to_json``"""
        return cls.model_validate_json(data)


@dataclass
class RowQuality:
    """Row-level findings over the data section of a file"""
    duplicate_rows: int = 0
    empty_rows: int = 0
    complete_rows: int = 0
    average_field_length: float = 0.0
    inconsistent_rows: int = 0
    errors: List[str] = field(default_factory=list)
