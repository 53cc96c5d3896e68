"""Tests for recommendation extraction from model text."""

from __future__ import annotations

import json

import pytest

from gardenplan.llm.parsing import extract_json, fallback_recommendation, parse_recommendation
from gardenplan.models.garden import PlantType

PLAN = {
    "overview": "A cheerful sunny border.",
    "plants": [
        {"name": "Purple Coneflower (Echinacea purpurea)", "type": "perennial",
         "description": "Purple blooms", "placement": "Middle of bed"},
        {"name": "Ninebark (Physocarpus)", "type": "Shrub",
         "description": "Burgundy foliage", "placement": "Back"},
        {"name": "Little Bluestem", "type": "perennial/grass",
         "description": "Blue-green grass", "placement": "Front"},
    ],
    "layout": "Tall in back, short in front.",
    "tips": ["Water deeply", "Mulch", "Deadhead"],
}


class TestExtractJson:
    def test_plain_json(self):
        assert extract_json(json.dumps(PLAN)) == PLAN

    def test_fenced_block(self):
        text = f"Here is your plan:\n```json\n{json.dumps(PLAN)}\n```\nEnjoy!"
        assert extract_json(text) == PLAN

    def test_object_embedded_in_prose(self):
        text = f"Sure! {json.dumps(PLAN)} Let me know if you need more."
        assert extract_json(text) == PLAN

    def test_no_object(self):
        with pytest.raises(ValueError):
            extract_json("I could not see a garden in this photo.")

    def test_array_is_not_an_object(self):
        with pytest.raises(ValueError):
            extract_json("[1, 2, 3]")


class TestParseRecommendation:
    def test_types_are_normalised(self):
        rec = parse_recommendation(json.dumps(PLAN))
        assert [p.type for p in rec.plants] == [
            PlantType.PERENNIAL, PlantType.SHRUB, PlantType.OTHER,
        ]
        assert rec.tips == ["Water deeply", "Mulch", "Deadhead"]

    def test_missing_fields_default(self):
        rec = parse_recommendation('{"plants": [{"name": "Hosta"}]}')
        assert rec.overview == ""
        assert rec.plants[0].placement == ""
        assert rec.plants[0].type is PlantType.OTHER

    def test_unparseable_text_uses_fallback(self):
        text = "Lovely space! I would plant hostas along the shady fence."
        rec = parse_recommendation(text)
        assert rec.overview.startswith("Lovely space!")
        assert rec.overview.endswith("...")
        assert [p.name for p in rec.plants][0] == "Hosta (Hosta spp.)"
        assert len(rec.tips) == 3

    def test_invalid_shape_uses_fallback(self):
        rec = parse_recommendation('{"plants": "lots of hostas"}')
        assert len(rec.plants) == 3

    def test_fallback_overview_is_truncated(self):
        rec = fallback_recommendation("x" * 1000)
        assert rec.overview == "x" * 300 + "..."
