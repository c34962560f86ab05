"""Tests for line splitting, header/footer detection and hyphen merging."""

from dietplan.parser.lines import (
    find_repeated_lines,
    merge_continuations,
    prepare_lines,
    split_lines,
)


class TestSplitLines:
    def test_trims_and_drops_blank_lines(self):
        assert split_lines("  LUNEDI \n\n   \nCOLAZIONE\n") == ["LUNEDI", "COLAZIONE"]

    def test_empty_page(self):
        assert split_lines("") == []


class TestFindRepeatedLines:
    def test_single_page_never_filters(self):
        assert find_repeated_lines(["Studio Dr. Rossi\nLUNEDI"], 1) == set()

    def test_line_on_every_page(self):
        pages = [
            "Studio Dr. Rossi\nLUNEDI",
            "Studio Dr. Rossi\nMARTEDI",
            "Studio Dr. Rossi\nMERCOLEDI",
        ]
        assert find_repeated_lines(pages, 3) == {"Studio Dr. Rossi"}

    def test_exactly_half_is_not_enough(self):
        pages = ["Pagina comune\nA1", "Pagina comune\nB2", "C3 riga", "D4 riga"]
        assert find_repeated_lines(pages, 4) == set()

    def test_duplicate_on_one_page_counts_once(self):
        pages = ["Footer ripetuto\nFooter ripetuto", "altro testo", "ancora testo"]
        assert find_repeated_lines(pages, 3) == set()

    def test_short_lines_ignored(self):
        pages = ["uno\n-", "uno\n-"]
        assert find_repeated_lines(pages, 2) == set()


class TestMergeContinuations:
    def test_hyphen_between_lines(self):
        lines = ["yogurt di so", "-", "ia bianco"]
        assert merge_continuations(lines) == ["yogurt di so-ia bianco"]

    def test_next_line_consumed(self):
        lines = ["a prima", "-", "b seconda", "c terza"]
        assert merge_continuations(lines) == ["a prima-b seconda", "c terza"]

    def test_leading_hyphen_dropped(self):
        assert merge_continuations(["-", "pane"]) == ["pane"]

    def test_trailing_hyphen_keeps_previous(self):
        assert merge_continuations(["pane", "-"]) == ["pane"]

    def test_bullet_lines_untouched(self):
        lines = ["- 30g avena", "- 150g yogurt"]
        assert merge_continuations(lines) == lines


class TestPrepareLines:
    def test_removes_boilerplate_and_merges(self):
        pages = [
            "Piano Dieta Dr. Smith\nLUNEDI\nCOLAZIONE\n- yogurt di so\n-\nia",
            "Piano Dieta Dr. Smith\nMARTEDI",
        ]
        assert prepare_lines(pages) == [
            "LUNEDI",
            "COLAZIONE",
            "- yogurt di so-ia",
            "MARTEDI",
        ]
