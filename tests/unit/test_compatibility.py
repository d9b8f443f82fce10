"""Unit tests for compatibility scoring in the targeting context."""

import math

import pytest

from rescore.contexts.intake.exceptions import EmptyDocumentError
from rescore.contexts.intake.extractor import ExtractedProfile, extract_profile
from rescore.contexts.targeting.compatibility import (
    ENTRY_LEVEL,
    IMPROVEMENT_CERTIFICATIONS,
    IMPROVEMENT_SKILLS,
    JUNIOR,
    MID_LEVEL,
    RECOMMEND_CERTIFICATIONS,
    RECOMMEND_EDUCATION,
    RECOMMEND_EXPERIENCE,
    SENIOR,
    STRENGTH_EDUCATION,
    STRENGTH_EXPERIENCE,
    STRENGTH_SKILLS,
    calculate_compatibility,
    compare_profiles,
    determine_experience_level,
    round_half_up,
    validate_inputs,
)

CANDIDATE_TEXT = (
    "5 years experience as a Senior Software Engineer skilled in JavaScript, React, and AWS"
)
JOB_TEXT = "Looking for a developer proficient in JavaScript, React, Python with 3+ years experience"

EXPERIENCED = ("5 years experience",)
EDUCATED = ("bachelor of science",)
CERTIFIED = ("pmp",)


def weighted(report) -> int:
    return math.floor(
        report.skills_score * 0.5 + report.experience_score * 0.3 + report.education_score * 0.2 + 0.5
    )


@pytest.mark.unit
class TestEmptyInput:
    def test_empty_texts_score_full_marks(self):
        report = calculate_compatibility("", "")
        assert report.skills_score == 100
        assert report.experience_score == 100
        assert report.education_score == 100
        assert report.overall_score == 100
        assert report.missing_skills == ()

    def test_empty_candidate_gets_generic_recommendations_only(self):
        report = calculate_compatibility("", "")
        assert report.recommendations == (
            RECOMMEND_EXPERIENCE,
            RECOMMEND_EDUCATION,
            RECOMMEND_CERTIFICATIONS,
        )
        assert report.detailed_analysis.experience_level == ENTRY_LEVEL
        assert report.detailed_analysis.education_match is True
        assert report.detailed_analysis.strengths == ()
        assert report.detailed_analysis.improvements == (
            IMPROVEMENT_SKILLS,
            IMPROVEMENT_CERTIFICATIONS,
        )


@pytest.mark.unit
class TestResumeAgainstJobPosting:
    """Mixed scenario: partial skill overlap, both sides mention years of experience."""

    @pytest.fixture
    def report(self):
        return calculate_compatibility(CANDIDATE_TEXT, JOB_TEXT)

    def test_profiles_contain_expected_skills(self):
        assert {"JavaScript", "React", "AWS"} <= set(extract_profile(CANDIDATE_TEXT).skills)
        assert {"JavaScript", "React", "Python"} <= set(extract_profile(JOB_TEXT).skills)

    def test_python_is_first_missing_skill(self, report):
        assert report.missing_skills[0] == "Python"
        assert report.missing_skills == ("Python", "python with 3+ years experience")
        assert report.detailed_analysis.skills_missing == report.missing_skills

    def test_scores(self, report):
        # Job skills: JavaScript, React, Python, Java (substring of javascript),
        # and the free-text "python with 3+ years experience"; three are covered
        assert report.skills_score == 60
        assert report.experience_score == 80
        assert report.education_score == 100
        assert report.overall_score == 74

    def test_matched_skills(self, report):
        assert report.detailed_analysis.skills_matched == ("JavaScript", "React", "Java")

    def test_narrative(self, report):
        analysis = report.detailed_analysis
        assert analysis.experience_level == MID_LEVEL
        assert analysis.strengths == (STRENGTH_EXPERIENCE,)
        assert analysis.improvements == (IMPROVEMENT_CERTIFICATIONS,)
        assert report.recommendations == (
            "Consider learning these missing skills: Python, python with 3+ years experience",
            RECOMMEND_EDUCATION,
            RECOMMEND_CERTIFICATIONS,
        )


@pytest.mark.unit
class TestSkillsScore:
    def test_covered_job_skills_score_full(self):
        report = calculate_compatibility(
            "Docker, Kubernetes, Python and Flask in production.",
            "Must know Docker and Kubernetes.",
        )
        assert report.skills_score == 100
        assert report.missing_skills == ()

    def test_synonym_covers_job_skill(self):
        candidate = ExtractedProfile(skills=("JavaScript",))
        job = ExtractedProfile(skills=("js",))
        report = compare_profiles(candidate, job)
        assert report.skills_score == 100
        assert report.detailed_analysis.skills_matched == ("JavaScript",)

    def test_score_counts_job_skills_not_candidate_skills(self):
        """Several candidate skills matching one job skill still count once."""
        candidate = ExtractedProfile(skills=("React", "react.js", "reactjs"))
        job = ExtractedProfile(skills=("React", "Rust"))
        report = compare_profiles(candidate, job)
        assert report.skills_score == 50
        assert report.missing_skills == ("Rust",)
        assert report.detailed_analysis.skills_matched == ("React", "react.js", "reactjs")

    def test_half_points_round_up(self):
        job = ExtractedProfile(
            skills=("Alpha", "Bravo", "Charlie", "Delta", "Echo", "Foxtrot", "Golf", "Hotel")
        )
        report = compare_profiles(ExtractedProfile(skills=("Alpha",)), job)
        assert report.skills_score == 13
        assert report.overall_score == 57

    def test_missing_skills_keep_job_order(self):
        job = ExtractedProfile(skills=("Rust", "Python", "Kotlin", "Scala"))
        report = compare_profiles(ExtractedProfile(skills=("Python",)), job)
        assert report.missing_skills == ("Rust", "Kotlin", "Scala")


@pytest.mark.unit
class TestExperienceAndEducationScores:
    @pytest.mark.parametrize(
        "candidate_phrases, job_phrases, expected",
        [
            ((), (), 100),
            (EXPERIENCED, (), 100),
            (EXPERIENCED, ("3+ years experience",), 80),
            (("20 years experience",), ("3+ years experience",), 80),
            ((), ("3+ years experience",), 20),
        ],
    )
    def test_experience_score(self, candidate_phrases, job_phrases, expected):
        report = compare_profiles(
            ExtractedProfile(experience_phrases=candidate_phrases),
            ExtractedProfile(experience_phrases=job_phrases),
        )
        assert report.experience_score == expected

    @pytest.mark.parametrize(
        "candidate_phrases, job_phrases, expected, education_match",
        [
            ((), (), 100, True),
            (EDUCATED, ("degree engineering",), 90, True),
            ((), ("degree engineering",), 30, False),
        ],
    )
    def test_education_score(self, candidate_phrases, job_phrases, expected, education_match):
        report = compare_profiles(
            ExtractedProfile(education_phrases=candidate_phrases),
            ExtractedProfile(education_phrases=job_phrases),
        )
        assert report.education_score == expected
        assert report.detailed_analysis.education_match is education_match


@pytest.mark.unit
@pytest.mark.parametrize(
    "candidate, job",
    [
        (ExtractedProfile(), ExtractedProfile(skills=("Rust",), experience_phrases=EXPERIENCED)),
        (
            ExtractedProfile(skills=("Python",), education_phrases=EDUCATED),
            ExtractedProfile(skills=("Python", "Go", "Rust"), education_phrases=EDUCATED),
        ),
        (
            ExtractedProfile(skills=("A1x",)),
            ExtractedProfile(
                skills=("A1x", "B2y", "C3z"),
                experience_phrases=EXPERIENCED,
                education_phrases=EDUCATED,
            ),
        ),
    ],
)
def test_overall_score_is_weighted_sum(candidate, job):
    report = compare_profiles(candidate, job)
    assert report.overall_score == weighted(report)
    assert report.overall_score == round_half_up(
        report.skills_score * 0.5 + report.experience_score * 0.3 + report.education_score * 0.2
    )


@pytest.mark.unit
class TestExperienceLevel:
    @pytest.mark.parametrize(
        "phrases, expected",
        [
            (("8 years experience",), SENIOR),
            (("7 years experience",), SENIOR),
            (("3+ years experience",), MID_LEVEL),
            (("2 years experience",), JUNIOR),
            (("0 years experience",), JUNIOR),
            (("senior engineer",), ENTRY_LEVEL),
            ((), ENTRY_LEVEL),
        ],
    )
    def test_labels(self, phrases, expected):
        assert determine_experience_level(phrases) == expected

    def test_largest_number_across_phrases_wins(self):
        assert determine_experience_level(("2 years experience", "worked as lead on 12 teams")) == SENIOR

    def test_leading_zeros(self):
        assert determine_experience_level(("0002 years experience",)) == JUNIOR

    def test_enormous_number_does_not_raise(self):
        assert determine_experience_level(("9" * 5000 + " years experience",)) == SENIOR


@pytest.mark.unit
class TestRecommendations:
    def test_all_four_in_fixed_order(self):
        candidate = ExtractedProfile(skills=("Python",))
        job = ExtractedProfile(skills=("Rust", "Go", "Scala", "Kotlin"))
        report = compare_profiles(candidate, job)

        assert report.recommendations == (
            "Consider learning these missing skills: Rust, Go, Scala",
            RECOMMEND_EXPERIENCE,
            RECOMMEND_EDUCATION,
            RECOMMEND_CERTIFICATIONS,
        )

    def test_complete_candidate_gets_no_recommendations(self):
        candidate = ExtractedProfile(
            skills=("Python",),
            experience_phrases=EXPERIENCED,
            education_phrases=EDUCATED,
            certification_phrases=CERTIFIED,
        )
        report = compare_profiles(candidate, ExtractedProfile(skills=("Python",)))
        assert report.recommendations == ()
        assert report.detailed_analysis.improvements == (IMPROVEMENT_SKILLS,)


@pytest.mark.unit
def test_strengths_for_broad_profile():
    candidate = ExtractedProfile(
        skills=tuple(f"skill{i:02d}" for i in range(11)),
        experience_phrases=EXPERIENCED,
        education_phrases=EDUCATED,
        certification_phrases=CERTIFIED,
    )
    report = compare_profiles(candidate, ExtractedProfile())
    assert report.detailed_analysis.strengths == (
        STRENGTH_SKILLS,
        STRENGTH_EXPERIENCE,
        STRENGTH_EDUCATION,
    )
    assert report.detailed_analysis.improvements == ()


@pytest.mark.unit
def test_to_dict_matches_response_body():
    body = calculate_compatibility(CANDIDATE_TEXT, JOB_TEXT).to_dict()

    assert list(body) == [
        "overallScore",
        "skillsScore",
        "experienceScore",
        "educationScore",
        "missingSkills",
        "recommendations",
        "detailedAnalysis",
    ]
    assert list(body["detailedAnalysis"]) == [
        "skillsMatched",
        "skillsMissing",
        "experienceLevel",
        "educationMatch",
        "strengths",
        "improvements",
    ]
    assert body["missingSkills"] == body["detailedAnalysis"]["skillsMissing"]
    assert isinstance(body["missingSkills"], list)


@pytest.mark.unit
class TestValidateInputs:
    @pytest.mark.parametrize("candidate, job", [("", "job"), ("resume", ""), ("  \n", "job"), (None, "job")])
    def test_rejects_empty_text(self, candidate, job):
        with pytest.raises(EmptyDocumentError, match="required"):
            validate_inputs(candidate, job)

    def test_accepts_text(self):
        validate_inputs("resume", "job")
