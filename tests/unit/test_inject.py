# ABOUTME: Unit tests for injecting biblatex.* lines into an export copy of the extra field.
# ABOUTME: Validates user-override precedence and the no-data passthrough.

from cnemeta.export.biblatex import BibLaTeXMapper
from cnemeta.export.inject import export_extra, inject_biblatex_fields, user_biblatex_fields


class TestUserBiblatexFields:
    def test_detects_both_delimiters(self) -> None:
        extra = "biblatex.titleaddon= mine\nbiblatex.usere: also mine\nOCLC: 1"
        assert user_biblatex_fields(extra) == {"titleaddon", "usere"}


class TestInjectBiblatexFields:
    """Tests for inject_biblatex_fields()."""

    def test_appends_raw_lines(self) -> None:
        result = inject_biblatex_fields("OCLC: 123456", {"titleaddon": "\\textzh{清代}"})
        assert result == "OCLC: 123456\nbiblatex.titleaddon= \\textzh{清代}"

    def test_user_value_takes_precedence(self) -> None:
        extra = "biblatex.titleaddon= My custom title\ncne-title-original: 清代以來"
        result = inject_biblatex_fields(
            extra, {"titleaddon": "\\textzh{清代以來}", "usere": "English"}
        )
        assert result == (
            "biblatex.titleaddon= My custom title\n"
            "cne-title-original: 清代以來\n"
            "biblatex.usere= English"
        )

    def test_empty_extra(self) -> None:
        assert inject_biblatex_fields("", {"usere": "x"}) == "biblatex.usere= x"
        assert inject_biblatex_fields(None, {}) == ""


class TestExportExtra:
    """Tests for export_extra()."""

    def test_no_data_returns_text_unchanged(self) -> None:
        extra = "OCLC: 123456\ncne-title-romanized: Qingdai"
        assert export_extra(extra) == extra

    def test_keeps_metadata_lines_and_adds_fields(self, sample_extra: str) -> None:
        result = export_extra(sample_extra)
        assert result.startswith(sample_extra)
        assert "biblatex.titleaddon= \\textzh{清代以來三峽地區水旱災害的初步研究}" in result
        assert "biblatex.options= nametemplates=cjk" in result

    def test_custom_mapper(self, sample_extra: str) -> None:
        mapper = BibLaTeXMapper().with_enabled("titleaddon", False)
        assert "biblatex.titleaddon" not in export_extra(sample_extra, mapper)
