# local
from prettyformat.ordering import MapEntry, sort_entries


# ---------------------------------------------------------------------------- #
def test_str():
    assert str(MapEntry('0', '(int)', '"asd"', '')) == '(int)0: "asd"'


def test_sort_ignores_annotation():
    entries = [MapEntry('0', '(int)', '"asd"', ''),
               MapEntry('"foo"', '(string)', '"bar"', '')]
    assert [entry.key for entry in sort_entries(entries)] == ['"foo"', '0']


def test_sort_stable():
    # keys with identical text keep their relative order
    first = MapEntry('1', '(int)', 'a', '')
    second = MapEntry('1', '(uint)', 'b', '')
    assert sort_entries([first, second]) == [first, second]
    assert sort_entries([second, first]) == [second, first]
