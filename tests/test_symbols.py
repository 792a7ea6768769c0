from pprof_hotspots import SymbolIndex


def test_lookup_by_id(example_profile):
    index = SymbolIndex(example_profile)
    assert index.location(20).lines[0].function_id == 2
    assert index.function(1).name == 3
    assert index.location(99) is None
    assert index.function(99) is None


def test_resolve_string_out_of_range(example_profile):
    index = SymbolIndex(example_profile)
    assert index.resolve_string(3) == "f"
    assert index.resolve_string(0) == ""
    assert index.resolve_string(5) == ""
    assert index.resolve_string(-1) == ""


def test_ids_are_not_positions(make_profile):
    profile = make_profile(
        strings=["", "cpu", "ns", "main"],
        functions=[(7001, 3)],
        locations=[(90210, [7001])],
    )
    index = SymbolIndex(profile)
    assert index.function_name_at(90210) == "main"
    assert index.function_name_at(0) is None


def test_first_duplicate_id_wins(make_profile):
    profile = make_profile(
        strings=["", "cpu", "ns", "first", "second"],
        functions=[(1, 3), (1, 4)],
        locations=[(1, [1])],
    )
    assert SymbolIndex(profile).function_name_at(1) == "first"


def test_function_name_at_unresolved(make_profile):
    profile = make_profile(
        strings=["", "cpu", "ns", "f"],
        functions=[(1, 3), (2, 42)],
        locations=[(1, []), (2, [99]), (3, [2])],
    )
    index = SymbolIndex(profile)
    # no line info
    assert index.function_name_at(1) is None
    # dangling function id
    assert index.function_name_at(2) is None
    # name index out of range resolves to ""
    assert index.function_name_at(3) == ""


def test_only_innermost_line_is_used(make_profile):
    profile = make_profile(
        strings=["", "cpu", "ns", "inlined", "caller"],
        functions=[(1, 3), (2, 4)],
        locations=[(1, [1, 2])],
    )
    assert SymbolIndex(profile).function_name_at(1) == "inlined"
