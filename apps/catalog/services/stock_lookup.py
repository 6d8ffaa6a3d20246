"""
Approved medicine catalog and stock lookup.

The catalog is static reference data fixed for the process lifetime.
Lookups return the first entry, in catalog order, whose name contains the
query; there is no ranking between multiple matches.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class ApprovedMedicine:
    id: str
    name: str
    generic_name: str
    manufacturer: str
    composition: str
    dosage: str
    approval_date: date
    regulatory_id: str
    stock: int

    @property
    def in_stock(self) -> bool:
        return self.stock > 0


@dataclass(frozen=True)
class StockLookupResult:
    found: bool
    medicine: Optional[ApprovedMedicine] = None

    @property
    def in_stock(self) -> bool:
        return self.found and self.medicine.in_stock


NOT_FOUND = StockLookupResult(found=False)


APPROVED_MEDICINES: Tuple[ApprovedMedicine, ...] = (
    ApprovedMedicine(
        id='MED-001',
        name='Amoxicillin',
        generic_name='Amoxicillin Trihydrate',
        manufacturer='PharmaCorp Ltd',
        composition='Amoxicillin Trihydrate eq. to Amoxicillin 500mg',
        dosage='250mg, 500mg Capsules',
        approval_date=date(2020, 3, 15),
        regulatory_id='FDA-ANT-2020-0315',
        stock=0,
    ),
    ApprovedMedicine(
        id='MED-002',
        name='Paracetamol',
        generic_name='Acetaminophen',
        manufacturer='Multiple Approved',
        composition='Paracetamol IP 500mg/650mg',
        dosage='500mg, 650mg Tablets',
        approval_date=date(2018, 1, 20),
        regulatory_id='FDA-ANL-2018-0120',
        stock=450,
    ),
    ApprovedMedicine(
        id='MED-003',
        name='Metformin',
        generic_name='Metformin Hydrochloride',
        manufacturer='Multiple Approved',
        composition='Metformin Hydrochloride 500mg/850mg/1000mg',
        dosage='500mg, 850mg, 1000mg Tablets',
        approval_date=date(2019, 6, 10),
        regulatory_id='FDA-DIA-2019-0610',
        stock=320,
    ),
    ApprovedMedicine(
        id='MED-004',
        name='Atorvastatin',
        generic_name='Atorvastatin Calcium',
        manufacturer='CardioMed Pharmaceuticals',
        composition='Atorvastatin Calcium eq. to Atorvastatin 10mg/20mg/40mg',
        dosage='10mg, 20mg, 40mg Tablets',
        approval_date=date(2021, 2, 28),
        regulatory_id='FDA-CAR-2021-0228',
        stock=180,
    ),
    ApprovedMedicine(
        id='MED-005',
        name='Ciprofloxacin',
        generic_name='Ciprofloxacin Hydrochloride',
        manufacturer='BioPharm Industries',
        composition='Ciprofloxacin Hydrochloride eq. to Ciprofloxacin 250mg/500mg',
        dosage='250mg, 500mg Tablets',
        approval_date=date(2020, 9, 15),
        regulatory_id='FDA-ANT-2020-0915',
        stock=275,
    ),
    ApprovedMedicine(
        id='MED-006',
        name='Omeprazole',
        generic_name='Omeprazole',
        manufacturer='GastroHealth Pharma',
        composition='Omeprazole 20mg/40mg',
        dosage='20mg, 40mg Capsules',
        approval_date=date(2019, 11, 22),
        regulatory_id='FDA-GAS-2019-1122',
        stock=0,
    ),
)


class StockCatalog:
    """Read-only view over a fixed sequence of approved medicines."""

    def __init__(self, entries: Iterable[ApprovedMedicine]):
        self._entries = tuple(entries)

    def __iter__(self):
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def lookup(self, query: str) -> StockLookupResult:
        """
        First entry whose name contains query, case-insensitively.

        Args:
            query: Search term; matched as a substring of the medicine name

        Returns:
            StockLookupResult with found=False when nothing matches
        """
        needle = (query or '').lower()
        for medicine in self._entries:
            if needle in medicine.name.lower():
                return StockLookupResult(found=True, medicine=medicine)
        return NOT_FOUND

    def search(self, query: Optional[str] = '') -> List[ApprovedMedicine]:
        """Entries matching query on name, generic name, manufacturer or regulatory id."""
        if not query:
            return list(self._entries)

        needle = query.lower()
        return [
            medicine for medicine in self._entries
            if needle in medicine.name.lower()
            or needle in medicine.generic_name.lower()
            or needle in medicine.manufacturer.lower()
            or needle in medicine.regulatory_id.lower()
        ]


_default_catalog = StockCatalog(APPROVED_MEDICINES)


def get_default_catalog() -> StockCatalog:
    """The process-wide reference catalog."""
    return _default_catalog
