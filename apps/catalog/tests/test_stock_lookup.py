from datetime import date
from apps.catalog.services import APPROVED_MEDICINES, ApprovedMedicine, StockCatalog, get_default_catalog


def _medicine(name, stock, **kwargs):
    defaults = {
        'id': f'MED-{name}',
        'generic_name': name,
        'manufacturer': 'Test Pharma',
        'composition': '',
        'dosage': '',
        'approval_date': date(2020, 1, 1),
        'regulatory_id': f'REG-{name}',
    }
    defaults.update(kwargs)
    return ApprovedMedicine(name=name, stock=stock, **defaults)


class TestLookup:

    def test_found_out_of_stock(self):
        result = get_default_catalog().lookup('amox')

        assert result.found
        assert result.medicine.name == 'Amoxicillin'
        assert result.in_stock is False

    def test_found_in_stock(self):
        result = get_default_catalog().lookup('PARA')

        assert result.found
        assert result.in_stock is True
        assert result.medicine.stock == 450

    def test_not_found(self):
        result = get_default_catalog().lookup('ibuprofen')

        assert not result.found
        assert result.medicine is None
        assert result.in_stock is False

    def test_first_match_in_catalog_order_wins(self):
        catalog = StockCatalog([
            _medicine('Metformin XR', 0),
            _medicine('Metformin', 100),
        ])
        result = catalog.lookup('metformin')

        assert result.medicine.name == 'Metformin XR'
        assert result.in_stock is False

    def test_matches_name_only(self):
        # "Acetaminophen" is Paracetamol's generic name
        assert not get_default_catalog().lookup('acetaminophen').found


class TestSearch:

    def test_empty_query_returns_all(self):
        assert len(get_default_catalog().search('')) == len(APPROVED_MEDICINES)

    def test_search_fields(self):
        catalog = get_default_catalog()

        assert [m.name for m in catalog.search('acetaminophen')] == ['Paracetamol']
        assert [m.name for m in catalog.search('multiple approved')] == ['Paracetamol', 'Metformin']
        assert [m.name for m in catalog.search('fda-gas')] == ['Omeprazole']


class TestReferenceCatalog:

    def test_order_and_stock(self):
        assert [m.id for m in APPROVED_MEDICINES] == [
            'MED-001', 'MED-002', 'MED-003', 'MED-004', 'MED-005', 'MED-006',
        ]
        assert [m.name for m in APPROVED_MEDICINES if not m.in_stock] == ['Amoxicillin', 'Omeprazole']
