from jobscan.models import SearchCriteria
from jobscan.prompts import INSIGHT_KEYS, LISTING_KEYS, build_insights_prompt, build_search_prompt


class TestSearchPrompt:
    def test_embeds_criteria(self):
        c = SearchCriteria.build(
            "Vienna, Mödling", ["junior", "office"], ["senior"], ["Part-time", "Full-time"]
        )
        prompt = build_search_prompt(c)
        assert "near Vienna, Mödling" in prompt
        assert "Keywords: junior, office." in prompt
        assert "Exclude: senior." in prompt
        assert "Job Types: Full-time, Part-time." in prompt
        assert "in Austria" in prompt

    def test_schema_directive(self):
        prompt = build_search_prompt(SearchCriteria.build("Graz"))
        assert "```json" in prompt
        for key in LISTING_KEYS:
            assert f'"{key}"' in prompt
        assert "omit that listing" in prompt
        assert "Exclude: none." in prompt

    def test_deterministic(self, vienna):
        assert build_search_prompt(vienna, "Germany") == build_search_prompt(vienna, "Germany")
        assert "in Germany" in build_search_prompt(vienna, "Germany")


class TestInsightsPrompt:
    def test_embeds_count_and_keys(self, vienna):
        prompt = build_insights_prompt(vienna, 7)
        assert "Number of Jobs Found: 7" in prompt
        assert "- Location: Vienna" in prompt
        assert "- Job Types: Internship" in prompt
        for key in INSIGHT_KEYS:
            assert f'"{key}"' in prompt
        assert "single JSON object" in prompt
