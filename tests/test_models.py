import pytest

from jobscan.models import JobType, SearchCriteria, is_actionable_url


class TestActionableUrl:
    @pytest.mark.parametrize("url", [
        "https://e.co/1",
        "http://jobs.example.at/123?ref=x",
        "  https://padded.example.com  ",
    ])
    def test_absolute(self, url):
        assert is_actionable_url(url)

    @pytest.mark.parametrize("url", [
        None, "", "#", "/jobs/1", "jobs.example.com/1",
        "ftp://files.example.com", "javascript:alert(1)", "https://", 42,
    ])
    def test_not_actionable(self, url):
        assert not is_actionable_url(url)


class TestSearchCriteria:
    def test_build_from_form_strings(self):
        c = SearchCriteria.build(
            location=" Vienna ",
            include_keywords="junior, office , ,tech",
            exclude_keywords="senior",
            job_types=["internship", "Full-time"],
        )
        assert c.location == "Vienna"
        assert c.include_keywords == ("junior", "office", "tech")
        assert c.exclude_keywords == ("senior",)
        assert c.ordered_job_types == [JobType.FULL_TIME, JobType.INTERNSHIP]

    def test_unknown_job_type(self):
        with pytest.raises(ValueError):
            SearchCriteria.build(location="x", job_types=["Freelance"])

    def test_immutable(self):
        c = SearchCriteria.build(location="Vienna")
        with pytest.raises(AttributeError):
            c.location = "Graz"

    def test_to_dict(self):
        c = SearchCriteria.build("Graz", ["a"], [], ["Contract"])
        assert c.to_dict() == {
            "location": "Graz",
            "include_keywords": ["a"],
            "exclude_keywords": [],
            "job_types": ["Contract"],
        }
