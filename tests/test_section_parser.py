from config import settings
from services.section_parser import (
    build_resume_sections,
    detect_section_order,
    extract_bullets,
    extract_contact_info,
    extract_degree_field,
    extract_education_level,
    extract_experience_years,
    extract_required_years,
    parse_sections,
    split_skills,
)


SAMPLE_RESUME = """John Doe
john.doe@email.com | (555) 123-4567
linkedin.com/in/johndoe | github.com/johndoe

Summary
Experienced software engineer with 5+ years building web applications.

Experience
Senior Software Engineer | TechCorp | 2021 - Present
• Built REST APIs serving 1M requests/day
• Led team of 5 engineers

Software Engineer | StartupXYZ | 2019 - 2021
• Developed React frontend components
• Implemented CI/CD pipelines

Education
B.S. Computer Science | State University | 2019

Skills
Python, JavaScript, React, Docker, AWS, PostgreSQL, Git
"""


def test_parse_sections_detects_all():
    sections = parse_sections(SAMPLE_RESUME)
    assert "summary" in sections
    assert "experience" in sections
    assert "education" in sections
    assert "skills" in sections
    assert "header" in sections


def test_parse_sections_content():
    sections = parse_sections(SAMPLE_RESUME)
    assert "REST APIs" in sections["experience"]
    assert "Computer Science" in sections["education"]
    assert "Python" in sections["skills"]


def test_parse_sections_empty():
    assert parse_sections("") == {}


def test_parse_sections_repeated_heading_appends():
    text = "Projects\nFirst project entry here\n\nSkills\nPython\n\nProjects\nSecond project entry here"
    sections = parse_sections(text)
    assert "First project" in sections["projects"]
    assert "Second project" in sections["projects"]


def test_parse_sections_informal_headings():
    text = "My Journey\n- Shipped the billing platform\n\nMy Toolkit\nPython, Go"
    sections = parse_sections(text)
    assert "billing platform" in sections["experience"]
    assert "Python" in sections["skills"]


def test_detect_section_order():
    assert detect_section_order(SAMPLE_RESUME) == ["summary", "experience", "education", "skills"]


def test_detect_section_order_ignores_repeats():
    text = "Skills\nPython\nEducation\nBSc\nSkills\nGo"
    assert detect_section_order(text) == ["skills", "education"]


def test_extract_contact_info():
    contact = extract_contact_info(SAMPLE_RESUME)
    assert contact["email"] == "john.doe@email.com"
    assert contact["phone"] == "(555) 123-4567"
    assert contact["linkedin"] == "linkedin.com/in/johndoe"
    assert contact["github"] == "github.com/johndoe"


def test_extract_contact_info_date_range_is_not_a_phone():
    contact = extract_contact_info("Engineer | 2019 - 2021")
    assert contact["phone"] is None
    assert contact["email"] is None


# --- Bullets and skills ---

def test_extract_bullets_strips_markers():
    text = "Acme Corp\n• Built REST APIs serving 1M requests/day\n- Led team of 5 engineers\n1. Cut cloud spend by 30%"
    assert extract_bullets(text) == [
        "Built REST APIs serving 1M requests/day",
        "Led team of 5 engineers",
        "Cut cloud spend by 30%",
    ]


def test_extract_bullets_drops_short_lines():
    assert extract_bullets("- ok\n- Designed the ingestion pipeline") == ["Designed the ingestion pipeline"]


def test_extract_bullets_falls_back_to_lines():
    text = "Designed the ingestion pipeline\nMigrated reporting to BigQuery"
    assert len(extract_bullets(text)) == 2


def test_split_skills():
    skills = split_skills("Languages: Python, Go | SQL\nTools: Docker; Kubernetes\nPython")
    assert skills == ["Python", "Go", "SQL", "Docker", "Kubernetes"]


def test_build_resume_sections():
    sections = build_resume_sections(SAMPLE_RESUME)
    assert sections.summary.startswith("Experienced software engineer")
    assert len(sections.experience) == 4
    assert "Docker" in sections.skills
    assert sections.projects == []
    assert sections.certifications == []
    assert sections.has("education")
    assert not sections.has("projects")


# --- Experience extraction tests ---

def test_extract_experience_years_explicit():
    text = "Senior engineer with 5+ years of experience in Python."
    years = extract_experience_years(text)
    assert years >= 5.0


def test_extract_experience_years_date_ranges():
    text = """
    Software Engineer | TechCorp | Jan 2020 - Present
    Junior Developer | StartupXYZ | Mar 2018 - Dec 2019
    """
    years = extract_experience_years(text)
    assert years >= 4.0


def test_extract_experience_years_pinned_present(monkeypatch):
    monkeypatch.setattr(settings, "reference_year", 2024)
    # Jan 2020 through Dec 2024
    assert extract_experience_years("Engineer | Jan 2020 - Present") == 4.9


def test_extract_experience_years_numeric_dates():
    assert extract_experience_years("Analyst | 03/2018 to 03/2020") == 2.0


def test_extract_experience_years_none():
    assert extract_experience_years("No dates in here at all") == 0.0


def test_extract_required_years():
    jd = "Requirements: 5+ years of experience in software development"
    years = extract_required_years(jd)
    assert years == 5.0


# --- Education level tests ---

def test_extract_education_level_bachelor():
    assert extract_education_level("B.S. Computer Science") == "bachelor"
    assert extract_education_level("Bachelor's in Engineering") == "bachelor"


def test_extract_education_level_master():
    assert extract_education_level("M.S. in Data Science") == "master"
    assert extract_education_level("Master's degree in CS") == "master"


def test_extract_education_level_phd():
    assert extract_education_level("Ph.D. in Machine Learning") == "phd"


def test_extract_education_level_none():
    assert extract_education_level("Some random text") == ""


def test_extract_education_level_ignores_common_words():
    assert extract_education_level("Experience with tools such as Jira and Confluence") == ""


def test_extract_education_level_highest():
    """Should return the highest degree found."""
    text = "B.S. from MIT, M.S. from Stanford, Ph.D. from Berkeley"
    assert extract_education_level(text) == "phd"


def test_extract_degree_field():
    assert extract_degree_field("Bachelor of Science in Computer Science") == "Computer Science"
    assert extract_degree_field("Self-taught") == ""


def test_extract_bullets_unicode_markers():
    text = "■ Shipped the billing service\n◆ Wrote the on-call runbook\n2) Cut p99 latency by 40%"
    assert extract_bullets(text) == [
        "Shipped the billing service",
        "Wrote the on-call runbook",
        "Cut p99 latency by 40%",
    ]


def test_extract_bullets_marker_does_not_span_lines():
    assert extract_bullets("-\n- Designed the ingestion pipeline") == ["Designed the ingestion pipeline"]
    assert extract_bullets("- Ten chars.") == []
