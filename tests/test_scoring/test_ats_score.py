"""Tests for the composite ATS score and its component scorers."""

import pytest
from pydantic import ValidationError

from config import settings
from models.schemas.scoring import (
    ATSScoreInput,
    CertificationRequirement,
    CompositeScore,
    DegreeRequirement,
    ExperienceRequirement,
    JDQualifications,
    KeywordMatch,
    ResumeDegree,
    ResumeQualifications,
    ScoreMetadata,
)
from models.schemas.sections import ResumeSections
from services.scoring.ats_score import (
    calculate_ats_score_v21,
    detect_job_role,
    detect_seniority,
    get_score_tier,
    get_weight_profile,
)
from services.scoring.constants import ALGORITHM_VERSION, CANDIDATE_TYPES, COMPONENTS
from services.scoring.content_quality import (
    calculate_content_quality,
    classify_action_verb,
    extract_quantifications,
)
from services.scoring.format_score import calculate_format_score
from services.scoring.keyword_score import calculate_keyword_score, generate_keyword_action_items
from services.scoring.qualification_fit import calculate_qualification_fit, check_field_match

SKILLS = ["Python", "Java", "SQL", "React", "Docker", "AWS", "Git", "Linux"]
EDUCATION = "Bachelor of Science, Computer Science, State University"


def _kw(keyword, **kwargs):
    return KeywordMatch(keyword=keyword, **kwargs)


# ---------------------------------------------------------------------------
# Tiers and weights
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("score,tier", [
    (100, "Excellent"),
    (85, "Excellent"),
    (84, "Strong"),
    (70, "Strong"),
    (69, "Competitive"),
    (55, "Competitive"),
    (54, "Needs Work"),
    (0, "Needs Work"),
])
def test_score_tier(score, tier):
    assert get_score_tier(score) == tier


class TestWeightProfiles:
    @pytest.mark.parametrize("candidate_type", CANDIDATE_TYPES)
    def test_weights_sum_to_one(self, candidate_type):
        weights = get_weight_profile(candidate_type)
        assert set(weights) == set(COMPONENTS)
        assert sum(weights.values()) == pytest.approx(1.0)

    def test_career_changer_relative_to_fulltime(self):
        changer = get_weight_profile("career_changer")
        fulltime = get_weight_profile("fulltime")
        assert changer["sections"] > fulltime["sections"]
        assert changer["qualification_fit"] < fulltime["qualification_fit"]

    def test_profiles_differ_by_type(self):
        profiles = [tuple(get_weight_profile(t).values()) for t in CANDIDATE_TYPES]
        assert len(set(profiles)) == 3

    def test_senior_fulltime_profile(self):
        weights = get_weight_profile("fulltime", seniority="senior")
        assert weights["qualification_fit"] == 0.20
        assert weights["content_quality"] == 0.25

    def test_entry_fulltime_uses_coop_profile(self):
        assert get_weight_profile("fulltime", seniority="entry") == get_weight_profile("coop")

    def test_seniority_ignored_for_other_types(self):
        assert get_weight_profile("coop", seniority="senior") == get_weight_profile("coop")

    def test_role_shift(self):
        base = get_weight_profile("fulltime")
        shifted = get_weight_profile("fulltime", role="software_engineer")
        assert shifted["keywords"] == pytest.approx(base["keywords"] + 0.03)
        assert shifted["sections"] == pytest.approx(base["sections"] - 0.03)
        assert sum(shifted.values()) == pytest.approx(1.0)

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            get_weight_profile("intern")

    def test_detect_job_role(self):
        assert detect_job_role("Senior Backend Developer, payments") == "software_engineer"
        assert detect_job_role("Data Scientist, growth experiments") == "data_scientist"
        assert detect_job_role("Warehouse associate") == "general"

    def test_detect_seniority(self):
        assert detect_seniority("Senior Software Engineer", "fulltime") == "senior"
        assert detect_seniority("Junior developer, 0-2 years", "fulltime") == "entry"
        assert detect_seniority("Engineering Director", "fulltime") == "executive"
        assert detect_seniority("Software Engineer", "fulltime") == "mid"
        assert detect_seniority("Senior Software Engineer", "coop") == "mid"


# ---------------------------------------------------------------------------
# Component scorers
# ---------------------------------------------------------------------------

class TestKeywordScore:
    def test_no_keywords_is_full_score(self):
        assert calculate_keyword_score([]).score == 100

    def test_all_required_exact_in_skills(self):
        keywords = [
            _kw("python", found=True, match_type="exact", placement="skills_section"),
            _kw("sql", found=True, match_type="exact", placement="skills_section"),
        ]
        result = calculate_keyword_score(keywords)
        assert result.score == 100
        assert result.penalty_multiplier == 1.0

    def test_missing_required_penalty_and_preferred_bonus(self):
        keywords = [
            _kw("python", importance="high", found=True, match_type="exact", placement="skills_section"),
            _kw("kubernetes", importance="high"),
            _kw("terraform", importance="low", requirement="preferred",
                found=True, match_type="exact", placement="skills_section"),
        ]
        result = calculate_keyword_score(keywords)
        assert result.required_score == 0.5
        assert result.penalty_multiplier == 0.88
        assert result.preferred_bonus == 0.25
        assert result.score == 69
        assert result.missing_required == ["kubernetes"]

    def test_match_type_and_placement_discount(self):
        keywords = [_kw("kubernetes", importance="high", found=True,
                        match_type="semantic", placement="experience_bullet")]
        assert calculate_keyword_score(keywords).score == 55

    def test_penalty_floor(self):
        keywords = [_kw(f"skill{i}") for i in range(10)]
        result = calculate_keyword_score(keywords)
        assert result.penalty_multiplier == 0.30
        assert result.score == 0

    def test_action_items(self):
        keywords = [
            _kw("docker"),
            _kw("kubernetes", found=True, match_type="semantic", placement="summary"),
        ]
        items = generate_keyword_action_items(calculate_keyword_score(keywords))
        assert items[0] == ("critical", "Add missing REQUIRED keywords: docker")
        assert items[1][0] == "high"


class TestQualificationFit:
    def test_no_requirements(self):
        result = calculate_qualification_fit(JDQualifications(), ResumeQualifications())
        assert result.score == 100

    def test_degree_one_level_below(self):
        jd = JDQualifications(degree_required=DegreeRequirement(level="master", fields=["Computer Science"]))
        resume = ResumeQualifications(degree=ResumeDegree(level="bachelor", field="Computer Science"))
        result = calculate_qualification_fit(jd, resume)
        assert result.degree_score == 50
        assert result.degree_met is False
        assert result.score == 80

    def test_no_degree_listed(self):
        jd = JDQualifications(degree_required=DegreeRequirement(level="bachelor"))
        result = calculate_qualification_fit(jd, ResumeQualifications())
        assert result.degree_score == 20
        assert result.degree_note == "No degree listed"

    def test_experience_slightly_below(self):
        jd = JDQualifications(experience_required=ExperienceRequirement(min_years=5))
        result = calculate_qualification_fit(jd, ResumeQualifications(total_experience_years=4))
        assert result.experience_score == 75
        assert result.experience_note == "4 years slightly below 5+ requirement"

    def test_certifications(self):
        jd = JDQualifications(certifications_required=CertificationRequirement(
            certifications=["AWS Certified Solutions Architect", "CKA"]
        ))
        resume = ResumeQualifications(certifications=["AWS Certified Solutions Architect - Associate"])
        result = calculate_qualification_fit(jd, resume)
        assert result.certifications_met == ["AWS Certified Solutions Architect"]
        assert result.certifications_missing == ["CKA"]
        assert result.certification_score == 50

    def test_field_match(self):
        assert check_field_match("Computer Science", ["Computer Science"]) == "exact"
        assert check_field_match("Mathematics", ["Computer Science or related field"]) == "related"
        assert check_field_match("History", ["Computer Science"]) == "none"
        assert check_field_match("", ["Computer Science"]) == "none"


class TestContentQuality:
    def test_no_bullets(self):
        result = calculate_content_quality([], ["python"])
        assert result.score == 0
        assert result.keywords_missing == ["python"]

    @pytest.mark.parametrize("bullet,strength", [
        ("Led a team of four", "strong"),
        ("Maintained the billing cron jobs", "moderate"),
        ("Helped with onboarding", "weak"),
        ("Was responsible for deployments", "weak"),
        ("Python scripts for reporting", "unknown"),
    ])
    def test_classify_action_verb(self, bullet, strength):
        assert classify_action_verb(bullet) == strength

    def test_quantification_tiers(self):
        matches = extract_quantifications("Generated $2M in new revenue")
        assert matches[0].tier == "high"
        assert matches[0].kind == "currency"

    def test_keyword_coverage(self):
        bullets = ["Built Python services on AWS", "Designed dashboards"]
        result = calculate_content_quality(bullets, ["python", "aws", "go", "rust"])
        assert result.keywords_found == ["python", "aws"]
        assert result.keyword_density_score == 100

    def test_strong_verbs_without_metrics(self):
        bullets = ["Built the deployment pipeline", "Designed the caching layer"]
        result = calculate_content_quality(bullets, ["kubernetes"])
        assert result.quantification_score == 0
        assert result.action_verb_score == 100
        assert result.keyword_density_score == 0
        assert result.score == 30


class TestFormatScore:
    def test_empty_text(self):
        result = calculate_format_score("")
        assert result.score == 65
        assert "No email address detected" in result.issues

    def test_well_formed_resume(self):
        bullets = "\n".join(
            f"- Built payment service number {i} for merchants in several regions" for i in range(30)
        )
        text = (
            "Jordan Lee\njordan@example.com | (555) 010-2000 | linkedin.com/in/jordanlee\n\n"
            "Summary\nPlatform engineer.\n\nExperience\nAcme | Jan 2019 - Present\n"
            f"{bullets}\n\nEducation\nB.S. Computer Science, 2018\n\nSkills\nPython, Go\n"
        )
        result = calculate_format_score(text, has_experience=True, has_summary=True)
        assert result.score == 100
        assert result.has_linkedin is True
        assert result.issues == []

    def test_outdated_conventions(self):
        text = "Objective:\nTo obtain a position.\n\nReferences available upon request"
        result = calculate_format_score(text)
        assert result.no_outdated_formats is False
        assert any("Objective" in i for i in result.issues)
        assert any("References" in w for w in result.warnings)


# ---------------------------------------------------------------------------
# Composite
# ---------------------------------------------------------------------------

class TestCompositeScore:
    def test_three_types_three_scores(self):
        data = ATSScoreInput(
            keywords=[_kw("kubernetes"), _kw("terraform")],
            sections=ResumeSections(
                summary="Backend engineer focused on reliable data systems and APIs.",
                skills=SKILLS,
                education=EDUCATION,
                experience=[
                    "Built the order service",
                    "Designed the fraud scoring API",
                    "Led the move to managed queues",
                    "Developed internal admin tooling",
                    "Implemented audit logging",
                    "Automated release tagging",
                ],
            ),
        )
        scores = {
            t: calculate_ats_score_v21(data.model_copy(update={"candidate_type": t})).overall
            for t in CANDIDATE_TYPES
        }
        assert len(set(scores.values())) == 3

    def test_coop_with_projects_and_no_experience(self):
        data = ATSScoreInput(
            candidate_type="coop",
            keywords=[
                _kw("python", found=True, match_type="exact", placement="skills_section"),
                _kw("react", found=True, match_type="exact", placement="skills_section"),
            ],
            sections=ResumeSections(
                skills=SKILLS,
                education="B.S. Computer Science, Expected May 2026. GPA: 3.8",
                projects=[
                    "Built a React Native food ordering app used by 300 students",
                    "Developed a Python course planner that cut scheduling time by 40%",
                ],
            ),
        )
        result = calculate_ats_score_v21(data)
        assert "experience" not in result.breakdown["sections"].details.breakdown
        assert result.overall > 70

    def test_breakdown_and_metadata(self):
        result = calculate_ats_score_v21(ATSScoreInput(sections=ResumeSections(skills=SKILLS)))
        assert set(result.breakdown) == set(COMPONENTS)
        assert result.metadata.algorithm_version == ALGORITHM_VERSION
        assert result.tier == get_score_tier(result.overall)
        for component in result.breakdown.values():
            assert 0 <= component.score <= 100

    def test_action_items_sorted_and_capped(self, monkeypatch):
        monkeypatch.setattr(settings, "max_action_items", 3)
        data = ATSScoreInput(keywords=[_kw("docker"), _kw("kubernetes")])
        items = calculate_ats_score_v21(data).action_items
        assert len(items) == 3
        assert items[0].priority == "critical"
        assert items[0].category == "Keywords"

    def test_seniority_adjustment_toggle(self, monkeypatch):
        data = ATSScoreInput(jd_text="Senior Software Engineer")
        assert calculate_ats_score_v21(data).metadata.detected_seniority == "senior"
        monkeypatch.setattr(settings, "apply_seniority_adjustment", False)
        metadata = calculate_ats_score_v21(data).metadata
        assert metadata.detected_seniority == "mid"
        assert metadata.weights_used == get_weight_profile("fulltime")

    def test_deterministic(self):
        data = ATSScoreInput(keywords=[_kw("docker")], sections=ResumeSections(skills=SKILLS))
        first = calculate_ats_score_v21(data)
        second = calculate_ats_score_v21(data)
        assert first == second

    def test_metadata_equality_ignores_timing(self):
        fast = ScoreMetadata(algorithm_version=ALGORITHM_VERSION, processing_time_ms=0.4)
        slow = ScoreMetadata(algorithm_version=ALGORITHM_VERSION, processing_time_ms=12.0)
        assert fast == slow
        assert fast != ScoreMetadata(algorithm_version=ALGORITHM_VERSION, detected_role="designer")

    def test_overall_bounds_enforced(self):
        with pytest.raises(ValidationError):
            CompositeScore(
                overall=101, tier="Excellent", candidate_type="coop",
                metadata=ScoreMetadata(algorithm_version=ALGORITHM_VERSION),
            )
