from services.keyword_extractor import (
    COMMON_KEYWORDS,
    NO_KEYWORDS_SCORE,
    analyze_keywords,
    compute_keyword_frequency,
    compute_keyword_score,
    extract_keywords,
    match_keywords,
)
from services.text_normalizer import Document


def test_extract_keywords_vocabulary_order():
    assert extract_keywords("Senior Engineer with LEADERSHIP") == [
        "leadership", "senior", "engineer",
    ]


def test_extract_keywords_multiword_and_hyphenated():
    keywords = extract_keywords("Project management and problem-solving; team lead")
    assert "project management" in keywords
    assert "problem-solving" in keywords
    assert "team lead" in keywords
    # "management" is contained in "project management"
    assert "management" in keywords


def test_vocabulary_has_expected_size():
    assert len(COMMON_KEYWORDS) == 17
    assert len(set(COMMON_KEYWORDS)) == 17


def test_match_keywords():
    matched, missing = match_keywords(Document("Leadership"), ["leadership", "strategy"])
    assert matched == ["leadership"]
    assert missing == ["strategy"]


def test_compute_keyword_score():
    assert compute_keyword_score([], []) == NO_KEYWORDS_SCORE
    assert compute_keyword_score(["a"], ["b"]) == 50.0
    assert compute_keyword_score(["a"], []) == 100.0
    assert compute_keyword_score([], ["a", "b"]) == 0.0


def test_compute_keyword_frequency():
    resume = Document("Design, DESIGN and more design")
    assert compute_keyword_frequency(resume, ["design", "strategy"]) == {
        "design": 3,
        "strategy": 0,
    }


def test_analyze_keywords():
    resume = Document("Led design and strategy as a senior engineer")
    job = Document("Senior architect: design, strategy and innovation")
    profile = analyze_keywords(resume, job)

    assert profile.matched_keywords == ["design", "strategy", "senior"]
    assert profile.missing_keywords == ["innovation", "architect"]
    assert profile.total_keywords == 5
    assert profile.score == 60.0
    assert profile.keyword_frequency["design"] == 1
    assert profile.keyword_frequency["architect"] == 0
    assert profile.explanation == "Found 3 of 5 important keywords from the job description."


def test_analyze_keywords_empty_job_default():
    profile = analyze_keywords(Document("Senior engineer"), Document(""))
    assert profile.score == NO_KEYWORDS_SCORE
    assert profile.total_keywords == 0
    assert profile.matched_keywords == []
    assert profile.missing_keywords == []
    assert profile.keyword_frequency == {}
