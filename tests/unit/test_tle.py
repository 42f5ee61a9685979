from satsim import Universe
from satsim.io.tle import TleEntry, parse_tle_catalog_text, read_tle_catalog, add_tle_catalog
from satsim.models.lagrange_object import LagrangeInterpolatedObject

LINE1 = '1 00005U 58002B   00179.78495062  .00000023  00000-0  28098-4 0  4753'
LINE2 = '2 00005  34.2682 348.7242 1859667 331.7664  19.3264 10.82419157413667'


def test_three_line_format():
    text = f"VANGUARD 1\n{LINE1}\n{LINE2}\n"
    assert parse_tle_catalog_text(text) == [TleEntry('VANGUARD 1', LINE1, LINE2)]


def test_two_line_format_named_by_catalog_number():
    entries = parse_tle_catalog_text(f"{LINE1}\r\n{LINE2}")
    assert entries == [TleEntry('00005', LINE1, LINE2)]


def test_blank_lines_and_noise_skipped():
    text = (f"\n  # header\n\n   SAT A  \n  {LINE1}  \n\n{LINE2}\n"
            f"garbage\nSAT B\n{LINE1}\n{LINE2}\n{LINE1}\n{LINE2}\n")
    entries = parse_tle_catalog_text(text)
    assert [e.name for e in entries] == ['SAT A', 'SAT B', '00005']
    assert entries[0].line1 == LINE1


def test_limit():
    text = "\n".join([f"SAT {i}\n{LINE1}\n{LINE2}" for i in range(5)])
    assert len(parse_tle_catalog_text(text, limit=2)) == 2
    assert len(parse_tle_catalog_text(text)) == 5


def test_empty_text():
    assert parse_tle_catalog_text(None) == []
    assert parse_tle_catalog_text("") == []


def test_read_and_add_catalog(tmp_path):
    path = tmp_path / "catalog.tle"
    path.write_text(f"A\n{LINE1}\n{LINE2}\nB\n{LINE1}\n{LINE2}\n")

    entries = read_tle_catalog(path)
    universe = Universe()
    satellites = add_tle_catalog(universe, entries)

    assert [s.name for s in satellites] == ['A', 'B']
    assert all(isinstance(s, LagrangeInterpolatedObject) for s in satellites)
    assert universe.get_object('B') is satellites[1]
    assert satellites[0].inner.orientation == 'nadir'


def test_add_catalog_from_text_with_limit():
    universe = Universe()
    text = f"A\n{LINE1}\n{LINE2}\nB\n{LINE1}\n{LINE2}\n"
    satellites = add_tle_catalog(universe, text, lagrange_interpolated=False, limit=1)
    assert [s.name for s in satellites] == ['A']
