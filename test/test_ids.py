from pathwayqual.ids import IdentifierAllocator, sanitize_sid


def test_repeated_name_gets_smallest_free_suffix():
    ids = IdentifierAllocator()
    assert ids.allocate("gene") == "gene"
    assert ids.allocate("gene") == "gene_1"
    assert ids.allocate("gene") == "gene_2"


def test_suffix_skips_ids_already_taken():
    ids = IdentifierAllocator()
    ids.allocate("gene")
    assert ids.allocate("gene_1") == "gene_1"
    assert ids.allocate("gene") == "gene_2"


def test_empty_names_get_generic_ids():
    ids = IdentifierAllocator()
    assert ids.allocate("") == "SId_1"
    assert ids.allocate("   ") == "SId_2"
    assert ids.allocate(None) == "SId_3"


def test_sanitizing():
    assert sanitize_sid("HK1 protein") == "HK1_protein"
    assert sanitize_sid("  Ins(1,4,5)P3 ") == "Ins145P3"
    assert sanitize_sid("qual_D-Glucose") == "qual_DGlucose"
    assert sanitize_sid("_x") == "_x"
    # invalid first character is replaced by the prefix
    assert sanitize_sid("1abc") == "SId_abc"
    assert sanitize_sid("été") == "SId_t"


def test_all_ids_are_distinct():
    ids = IdentifierAllocator()
    names = ["x", "x", "x_1", "", "x y", "x_y", "1x", "SId_x", None, "x"] * 5
    issued = [ids.allocate(n) for n in names]
    assert len(issued) == len(set(issued))
    assert len(ids) == len(issued)
    assert all(i in ids for i in issued)


def test_reserved_ids_are_not_reissued():
    ids = IdentifierAllocator(["tr"])
    ids.reserve("in")
    assert ids.allocate("tr") == "tr_1"
    assert ids.allocate("in") == "in_1"
