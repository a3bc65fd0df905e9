"""Tests for missing-keyword gap classification."""

from models.schemas.scoring import KeywordMatch
from models.schemas.sections import ResumeSections
from services.scoring.gap_addressability import filter_gaps_for_section, process_gap_addressability

SECTIONS = ResumeSections(
    summary="Backend developer",
    skills=["Python", "MySQL", "Flask"],
    experience=["Led sprint planning for a team of 6", "Built REST APIs in Flask"],
    education="B.S. Computer Science",
)
RESUME_TEXT = (
    "Backend developer\nPython, MySQL, Flask\n"
    "Led sprint planning for a team of 6\nBuilt REST APIs in Flask\nB.S. Computer Science"
)
KEYWORDS = [
    KeywordMatch(keyword="kubernetes", found=True, match_type="exact", placement="skills_section"),
    KeywordMatch(keyword="scrum", importance="low", requirement="preferred"),
    KeywordMatch(keyword="django", importance="medium"),
    KeywordMatch(keyword="aws certification", category="certifications", importance="medium"),
    KeywordMatch(keyword="sql", importance="high"),
]


def _by_keyword(result):
    return {g.keyword: g for g in result.processed_gaps}


class TestProcessGapAddressability:
    def setup_method(self):
        self.result = process_gap_addressability(KEYWORDS, RESUME_TEXT, SECTIONS)
        self.gaps = _by_keyword(self.result)

    def test_found_keywords_are_skipped(self):
        assert "kubernetes" not in self.gaps

    def test_terminology_from_equivalent_wording(self):
        gap = self.gaps["sql"]
        assert gap.addressability == "terminology"
        assert gap.evidence == "mysql"
        assert gap.instruction == 'Change "mysql" to "sql" for exact JD match'
        assert gap.priority == "critical"
        assert gap.potential_impact == 12

    def test_potential_from_related_technology(self):
        gap = self.gaps["django"]
        assert gap.addressability == "potential"
        assert gap.evidence == "python"
        assert gap.priority == "high"

    def test_preferred_skill_without_evidence(self):
        gap = self.gaps["scrum"]
        assert gap.addressability == "potential"
        assert gap.evidence is None
        assert gap.priority == "low"
        assert gap.potential_impact == 2

    def test_certification_is_unfixable(self):
        gap = self.gaps["aws certification"]
        assert gap.addressability == "unfixable"
        assert gap.target_sections == ["education", "skills"]

    def test_sorted_by_priority(self):
        assert [g.keyword for g in self.result.processed_gaps] == [
            "sql", "django", "aws certification", "scrum",
        ]

    def test_summary(self):
        summary = self.result.summary
        assert summary.total_gaps == 4
        assert summary.terminology_fixes == 1
        assert summary.potential_additions == 2
        assert summary.unfixable_gaps == 1
        assert summary.total_potential_impact == 22


def test_reverse_terminology():
    keywords = [KeywordMatch(keyword="kanban")]
    gap = process_gap_addressability(keywords, "Ran Agile ceremonies for two squads").processed_gaps[0]
    assert gap.addressability == "terminology"
    assert gap.evidence == "agile"


def test_keyword_outside_parsed_sections():
    keywords = [KeywordMatch(keyword="graphql", importance="high")]
    gap = process_gap_addressability(keywords, "Jane Doe | GraphQL enthusiast\n" + RESUME_TEXT, SECTIONS).processed_gaps[0]
    assert gap.addressability == "terminology"
    assert gap.evidence == "graphql"


def test_soft_skill_without_evidence_is_unfixable():
    keywords = [KeywordMatch(keyword="negotiation", category="soft_skills")]
    gap = process_gap_addressability(keywords, RESUME_TEXT).processed_gaps[0]
    assert gap.addressability == "unfixable"
    assert gap.target_sections == ["summary", "experience"]


def test_no_missing_keywords():
    result = process_gap_addressability([], RESUME_TEXT)
    assert result.processed_gaps == []
    assert result.summary.total_gaps == 0


class TestFilterGapsForSection:
    def setup_method(self):
        self.gaps = process_gap_addressability(KEYWORDS, RESUME_TEXT, SECTIONS).processed_gaps

    def test_skills_section(self):
        skills = filter_gaps_for_section(self.gaps, "skills")
        assert [g.keyword for g in skills.terminology_fixes] == ["sql"]
        assert [g.keyword for g in skills.potential_additions] == ["django"]
        assert [g.keyword for g in skills.opportunities] == ["scrum"]
        assert [g.keyword for g in skills.cannot_fix] == ["aws certification"]

    def test_section_without_targets(self):
        summary = filter_gaps_for_section(self.gaps, "summary")
        assert summary.terminology_fixes == []
        assert summary.cannot_fix == []
