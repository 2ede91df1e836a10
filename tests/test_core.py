# -*- coding: utf-8 -*-
"""Core 模块单元测试（无 LLM 调用）。"""

from __future__ import annotations

import logging

import pytest

from scriptdesk.core.csv_export import (
	BREAKDOWN_HEADER,
	breakdown_to_csv,
	read_breakdown_csv,
	shots_to_csv,
)
from scriptdesk.core.editor import ScriptDocument, Selection
from scriptdesk.core.fallbacks import (
	FALLBACKS,
	GRAMMAR_FALLBACK,
	SCENE_FALLBACK,
	SCRIPT_BREAKDOWN_FALLBACK,
	fallback_for,
)
from scriptdesk.core.io import project_paths
from scriptdesk.core.json_extract import (
	JsonExtractError,
	extract_json,
	recover_object_array,
	strip_code_fences,
)
from scriptdesk.core.normalizer import normalize_response
from scriptdesk.core.schemas import (
	BreakdownElementSet,
	CATEGORIES,
	PayloadShape,
	SHOT_DEFAULTS,
	ShotRecord,
	TaskKind,
	TASK_SHAPES,
	new_shot,
)
from scriptdesk.core.script_import import read_script_file
from scriptdesk.core.session import BreakdownSession, ShotListSession
from scriptdesk.core.shot_ingest import ingest_shots
from scriptdesk.core.store import JsonStore


SCENARIO_A = (
	'```json\n{"props":["lamp"],"wardrobe":[],"cast":[],"locations":[],"sfx":[],'
	'"vehicles":[],"animals":[],"stunts":[],"makeup":[],"equipment":[],"extras":[]}\n```'
)

MALFORMED = [
	None,
	123,
	"",
	"   ",
	"I cannot process this request.",
	"{",
	"}{",
	"[",
	"```",
	"```json\n```",
	"{'single': 'quotes'}",
	'{"a": 1} and {"b": 2}',
	'[{"a": 1}, {"b": ]',
	"[" * 5000 + "]" * 5000,
	"{" * 5000 + "}" * 5000,
	'{"a": NaN-ish}',
	'{"a": NaN}',
	'[{"a": Infinity}]',
	'{"a": -Infinity}',
]


class TestStripCodeFences:
	def test_language_tagged_and_bare(self):
		assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}\n'
		assert strip_code_fences('```\n[1]\n```') == "[1]\n"

	def test_no_fence(self):
		assert strip_code_fences("plain") == "plain"


class TestExtractJson:
	def test_object_inside_prose(self):
		text = 'Sure! Here it is: {"a": 1, "b": [1, 2]} Hope that helps.'
		assert extract_json(text, PayloadShape.OBJECT) == {"a": 1, "b": [1, 2]}

	def test_array_inside_fence(self):
		text = '```json\n[{"x": "y"}]\n```'
		assert extract_json(text, PayloadShape.ARRAY) == [{"x": "y"}]

	def test_no_json(self):
		with pytest.raises(JsonExtractError, match="no JSON object"):
			extract_json("nothing to see", PayloadShape.OBJECT)

	def test_object_expected_array_given(self):
		with pytest.raises(JsonExtractError):
			extract_json("[1, 2, 3]", PayloadShape.OBJECT)

	def test_two_objects_greedy_fails(self):
		with pytest.raises(JsonExtractError, match="invalid JSON"):
			extract_json('{"a": 1} then {"b": 2}', PayloadShape.OBJECT)

	def test_not_text(self):
		with pytest.raises(JsonExtractError):
			extract_json(None, PayloadShape.OBJECT)

	@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
	def test_non_standard_constants_rejected(self, constant):
		with pytest.raises(JsonExtractError, match="invalid JSON"):
			extract_json('{"overallScore": ' + constant + "}", PayloadShape.OBJECT)


class TestRecoverObjectArray:
	def test_skips_stray_brackets(self):
		text = 'Here are [5] shots: [{"description": "A"}] done'
		assert recover_object_array(text) == [{"description": "A"}]

	def test_no_array(self):
		with pytest.raises(JsonExtractError):
			recover_object_array("no shots [here]")

	def test_non_standard_constant_rejected(self):
		with pytest.raises(JsonExtractError):
			recover_object_array('ok [{"duration": Infinity}]')


class TestNormalizer:
	def test_scenario_a_no_defaults(self):
		r = normalize_response(TaskKind.SCRIPT_BREAKDOWN, SCENARIO_A)
		assert r.used_fallback is False
		assert r.payload["props"] == ["lamp"]
		assert set(r.payload) == set(CATEGORIES)
		assert all(r.payload[c] == [] for c in CATEGORIES if c != "props")

	def test_scenario_b_full_default_and_warning(self, caplog):
		with caplog.at_level(logging.WARNING, logger="scriptdesk.core.normalizer"):
			r = normalize_response(TaskKind.SCRIPT_BREAKDOWN, "I cannot process this request.")
		assert r.used_fallback is True
		assert r.payload == SCRIPT_BREAKDOWN_FALLBACK
		assert "failed to parse JSON" in caplog.text

	@pytest.mark.parametrize("task", list(TaskKind))
	def test_never_raises_and_keeps_shape(self, task):
		for raw in MALFORMED:
			r = normalize_response(task, raw)
			shape = TASK_SHAPES[task]
			if shape == PayloadShape.OBJECT:
				assert isinstance(r.payload, dict)
			elif shape == PayloadShape.ARRAY:
				assert isinstance(r.payload, list)
			else:
				assert isinstance(r.payload, str)

	@pytest.mark.parametrize("raw", ['{"overallScore": NaN, "issues": []}', '{"overallScore": Infinity}'])
	def test_nan_score_falls_back(self, raw):
		r = normalize_response(TaskKind.GRAMMAR, raw)
		assert r.used_fallback is True
		assert r.payload == GRAMMAR_FALLBACK

	def test_text_task_strips(self):
		r = normalize_response(TaskKind.HUMANIZE, "  hello there \n")
		assert r.payload == "hello there"
		assert r.used_fallback is False

	def test_scene_fallback_midpoint_scores(self):
		r = normalize_response(TaskKind.SCENE, "no json")
		assert r.payload["conflictLevel"] == 50
		assert r.payload == SCENE_FALLBACK

	def test_readability_fallback_keeps_text(self):
		r = normalize_response(TaskKind.READABILITY, "oops", subject_text="Original prose.")
		assert r.payload["optimizedVersion"] == "Original prose."


class TestFallbacks:
	def test_every_task_has_fallback(self):
		assert set(FALLBACKS) == set(TaskKind)

	def test_fallback_is_a_copy(self):
		v = fallback_for(TaskKind.GRAMMAR)
		v["issues"].append("mutated")
		assert GRAMMAR_FALLBACK["issues"] == []
		assert fallback_for(TaskKind.GRAMMAR)["overallScore"] == 75


class TestShotIngest:
	def test_scenario_c(self):
		shots = ingest_shots([{"description": "Wide shot of the house"}])
		assert len(shots) == 1
		s = shots[0]
		assert s.description == "Wide shot of the house"
		assert s.type == "MS"
		assert s.lens == "50mm"
		assert s.scene == SHOT_DEFAULTS["scene"]
		assert s.shot_number == SHOT_DEFAULTS["shotNumber"]
		assert s.angle == "Eye Level"
		assert s.movement == "Static"
		assert s.equipment == "Tripod"
		assert s.framing == "Medium"
		assert s.notes == ""
		assert s.duration == "5s"
		assert s.frame_rate == "24 fps"
		assert s.id

	def test_every_field_defined_and_ids_unique(self):
		payload = [{}, {"type": "CU"}, {"lens": None, "shotNumber": 3}] * 10
		shots = ingest_shots(payload)
		assert len(shots) == 30
		assert len({s.id for s in shots}) == 30
		for s in shots:
			for value in s.to_dict().values():
				assert isinstance(value, str)
		assert shots[2].lens == "50mm"
		assert shots[2].shot_number == "3"

	def test_colliding_id_factory_still_unique(self):
		shots = ingest_shots([{}, {}, {}], id_factory=lambda: "same")
		assert len({s.id for s in shots}) == 3

	def test_non_list_payload_recovers_from_raw(self):
		raw = 'Here are [5] shots: [{"description": "A"}, {"description": "B"}]'
		shots = ingest_shots(None, raw_text=raw)
		assert [s.description for s in shots] == ["A", "B"]

	def test_non_list_payload_without_recovery_is_empty(self):
		assert ingest_shots({"description": "x"}, raw_text="no array") == []

	def test_skips_non_object_elements(self):
		shots = ingest_shots(["just text", {"type": "CU"}, 7])
		assert len(shots) == 1
		assert shots[0].type == "CU"

	def test_idempotent_except_id(self):
		first = ingest_shots([{"description": "A", "type": "WS", "notes": 'say "hi"'}])
		second = ingest_shots(first)
		a = first[0].to_dict()
		b = second[0].to_dict()
		assert a.pop("id") != b.pop("id")
		assert a == b


class TestBreakdownElementSet:
	def test_from_payload_is_exhaustive(self):
		s = BreakdownElementSet.from_payload({"props": [" lamp ", 3, ""], "bogus": ["x"]})
		assert s.items("props") == ["lamp"]
		assert [c for c, _ in s] == CATEGORIES

	def test_unknown_category(self):
		with pytest.raises(ValueError):
			BreakdownElementSet().append("catering", "sandwiches")

	def test_append_remove_order(self):
		s = BreakdownElementSet()
		s.append("cast", "ANNA")
		s.append("cast", "BEN")
		s.append("cast", "CARL")
		assert s.remove("cast", 1) == "BEN"
		assert s.items("cast") == ["ANNA", "CARL"]


class TestCsv:
	def test_scenario_e_quoting(self):
		s = BreakdownElementSet()
		s.append("props", 'He said, "go now"')
		lines = breakdown_to_csv(s).splitlines()
		assert lines[0] == ",".join(BREAKDOWN_HEADER)
		assert lines[1] == 'props,"He said, ""go now"""'

	def test_breakdown_round_trip(self):
		s = BreakdownElementSet()
		s.append("props", 'He said, "go now"')
		s.append("props", "plain lamp")
		s.append("wardrobe", 'red "lucky" scarf')
		s.append("sfx", "thunder,\nrain")
		assert read_breakdown_csv(breakdown_to_csv(s)) == s

	def test_read_rejects_other_header(self):
		with pytest.raises(ValueError):
			read_breakdown_csv("a,b\n1,2\n")

	def test_shot_list_header_and_row(self):
		shot = ShotRecord(id="x", description='Door opens, "slowly"', equipment="Dolly, track")
		text = shots_to_csv([shot])
		lines = text.splitlines()
		assert lines[0] == "Scene,Shot,Description,Type,Angle,Movement,Equipment,Lens,Framing,Duration,Frame Rate,Notes"
		assert lines[1] == '1,1,"Door opens, ""slowly""",MS,Eye Level,Static,"Dolly, track",50mm,Medium,5s,24 fps,'


class TestEditor:
	def test_select_and_highlight(self):
		doc = ScriptDocument(text="INT. KITCHEN - NIGHT\nA lamp flickers.")
		sel = Selection(23, 27)
		assert doc.selected_text(sel) == "lamp"
		h = doc.apply_highlight(sel, background="#FFD700")
		assert h.color == "#000000"
		assert doc.highlights_at(24) == [h]
		assert doc.highlights_at(0) == []

	def test_out_of_range(self):
		doc = ScriptDocument(text="short")
		with pytest.raises(ValueError):
			doc.selected_text(Selection(2, 50))


class TestStore:
	def test_set_get_last_write_wins(self, tmp_path):
		store = JsonStore(tmp_path)
		store.set("shot_list", [1])
		store.set("shot_list", [2])
		assert store.get("shot_list") == [2]
		assert store.get("missing", "dflt") == "dflt"

	def test_corrupt_blob_returns_default(self, tmp_path, caplog):
		(tmp_path / "bad.json").write_text("{not json", encoding="utf-8")
		with caplog.at_level(logging.WARNING, logger="scriptdesk.core.store"):
			assert JsonStore(tmp_path).get("bad", []) == []
		assert "failed to read" in caplog.text

	def test_rejects_path_keys(self, tmp_path):
		with pytest.raises(ValueError):
			JsonStore(tmp_path).get("../escape")


class TestShotListSession:
	def test_mutations_persist(self, tmp_path):
		store = JsonStore(tmp_path)
		session = ShotListSession(store)
		shot = session.add(new_shot(scene="2", shot_number=session.next_shot_number("2")))
		assert shot.shot_number == "1"
		session.update(shot.id, description="Close on the lamp", type="CU")

		reloaded = ShotListSession(store)
		assert len(reloaded.shots) == 1
		assert reloaded.shots[0].description == "Close on the lamp"
		assert reloaded.shots[0].type == "CU"
		assert reloaded.next_shot_number("2") == "2"

		reloaded.delete(shot.id)
		assert ShotListSession(store).shots == []

	def test_update_missing_and_id_change(self, tmp_path):
		session = ShotListSession(JsonStore(tmp_path))
		with pytest.raises(KeyError):
			session.update("nope", notes="x")
		shot = session.add(new_shot())
		with pytest.raises(ValueError):
			session.update(shot.id, id="other")

	def test_add_generated_fills_blank_scene(self, tmp_path):
		session = ShotListSession(JsonStore(tmp_path))
		shots = ingest_shots([{"scene": "", "description": "A"}, {"scene": "4", "description": "B"}])
		added = session.add_generated(shots, current_scene="3")
		assert [s.scene for s in added] == ["3", "4"]

	def test_shot_from_selection(self, tmp_path):
		session = ShotListSession(JsonStore(tmp_path))
		text = "EXT. FIELD - DAY\n" + "x" * 200
		doc = ScriptDocument(text=text)
		shot = session.shot_from_selection(doc, Selection(0, len(text)), scene="5")
		assert len(shot.description) == 150
		assert shot.script_segment == text
		assert shot.scene == "5"
		assert shot.equipment == ""
		assert session.shots == []

	def test_script_persisted(self, tmp_path):
		store = JsonStore(tmp_path)
		ShotListSession(store).set_script("FADE IN:")
		assert ShotListSession(store).script == "FADE IN:"


class TestBreakdownSession:
	def test_tag_selection_highlights_and_persists(self, tmp_path):
		store = JsonStore(tmp_path)
		session = BreakdownSession(store)
		session.set_script("ANNA picks up the lamp.")
		tagged = session.tag_selection(Selection(17, 22), "props")
		assert tagged == "lamp"
		h = session.document.highlights[0]
		assert (h.start, h.end, h.background, h.color) == (17, 22, "#FFD700", "#000000")

		reloaded = BreakdownSession(store)
		assert reloaded.elements.items("props") == ["lamp"]
		assert len(reloaded.document.highlights) == 1

	def test_tag_blank_selection(self, tmp_path):
		session = BreakdownSession(JsonStore(tmp_path))
		session.set_script("a   b")
		with pytest.raises(ValueError):
			session.tag_selection(Selection(1, 4), "props")

	def test_accept_and_remove(self, tmp_path):
		store = JsonStore(tmp_path)
		session = BreakdownSession(store)
		session.accept_suggestion("cast", "ANNA")
		n = session.accept_all(BreakdownElementSet({"cast": ["BEN"], "vehicles": ["van"]}))
		assert n == 2
		assert session.remove("cast", 0) == "ANNA"
		assert BreakdownSession(store).elements.to_dict()["cast"] == ["BEN"]


class TestIoAndImport:
	def test_project_paths(self, tmp_path):
		paths = project_paths(tmp_path / "film")
		paths.ensure_dirs()
		paths.ensure_dirs()
		assert paths.store_dir.is_dir()
		assert paths.exports_dir.is_dir()

	def test_read_script_file_bom_and_newlines(self, tmp_path):
		p = tmp_path / "s.fountain"
		p.write_bytes("\ufeffINT. ROOM\r\nHello\r\n".encode("utf-8"))
		assert read_script_file(p) == "INT. ROOM\nHello\n"

	def test_missing_file(self, tmp_path):
		with pytest.raises(FileNotFoundError):
			read_script_file(tmp_path / "nope.txt")
