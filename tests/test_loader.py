"""Tests for loading documents from YAML drawing definitions."""

import numpy as np
import pytest
from PIL import Image as PILImage

from cadmodel import InvalidArgumentError, LayoutNotFoundError
from cadmodel.entities import EntityType, Line
from cadmodel.loader import DrawingLoader, parse_entity
from cadmodel.objects import UnderlayPdfDefinition, UnderlayType

SITE_PLAN = """
name: site_plan
active_layout: Sheet1

layouts:
  Sheet1:
    tab_order: 2

blocks:
  door:
    attributes:
      TAG1: {prompt: "Door id", value: "D1"}
    entities:
      - {type: line, start: [0, 0, 0], end: [1, 0, 0]}
      - {type: arc, center: [0, 0, 0], radius: 1, start_angle: 0, end_angle: 90}

underlays:
  survey: {type: pdf, file: survey.pdf, page: "2"}
  bridge: {type: dgn, file: "C:\\\\models\\\\bridge.dgn"}

entities:
  Model:
    - {type: line, start: [0, 0, 0], end: [10, 0, 0], layer: walls}
    - {type: circle, center: [5, 5, 0], radius: 2}
    - {type: line, start: [0, 5, 0], end: [10, 5, 0], layer: walls}
    - {type: underlay, definition: survey, position: [0, 0, 0]}
    - {type: insert, block_name: door, position: [2, 0, 0]}
    - {type: lwpolyline, vertices: [[0, 0], [4, 0], [4, 3]], is_closed: true}
  Sheet1:
    - {type: text, value: "Sheet 1", position: [10, 10, 0], height: 2.5}
    - {type: viewport, center: [150, 100, 0]}
"""


@pytest.fixture
def site_plan():
    return DrawingLoader().load_string(SITE_PLAN)


def test_document_name_and_active_layout(site_plan):
    assert site_plan.name == "site_plan"
    assert site_plan.entities.active_layout == "Sheet1"
    assert "Sheet1" in site_plan.layouts
    assert site_plan.layouts["Sheet1"].tab_order == 2


def test_layout_entities_are_loaded_in_order(site_plan):
    entities = site_plan.entities
    assert [t.value for t in entities.texts] == ["Sheet 1"]
    assert len(entities.viewports) == 1

    entities.active_layout = "Model"
    kinds = [entity.type for entity in entities.all]
    assert kinds == [
        EntityType.LINE,
        EntityType.CIRCLE,
        EntityType.LINE,
        EntityType.UNDERLAY,
        EntityType.INSERT,
        EntityType.LW_POLYLINE,
    ]
    assert all(line.layer == "walls" for line in entities.lines)
    np.testing.assert_array_equal(next(iter(entities.lines)).end, [10, 0, 0])


def test_every_loaded_entity_is_attached(site_plan):
    for layout in site_plan.layouts:
        for entity in site_plan.blocks[layout.block_name].entities:
            assert entity.owner == layout.block_name
            assert site_plan.added_objects[entity.handle] is entity


def test_block_definitions_are_loaded(site_plan):
    door = site_plan.blocks["door"]
    assert not door.is_layout_block
    assert [e.type for e in door.entities] == [EntityType.LINE, EntityType.ARC]
    assert door.attribute_definitions["TAG1"].value == "D1"
    assert door.attribute_definitions["TAG1"].prompt == "Door id"


def test_block_definition_entities_cannot_be_removed(site_plan):
    line = site_plan.blocks["door"].entities[0]
    assert site_plan.entities.remove(line) is False


def test_underlay_definitions_are_loaded(site_plan):
    survey = site_plan.underlay_definitions["survey"]
    assert isinstance(survey, UnderlayPdfDefinition)
    assert survey.page == "2"

    bridge = site_plan.underlay_definitions["bridge"]
    assert bridge.kind is UnderlayType.DGN
    assert bridge.file == "C:\\models\\bridge.dgn"

    site_plan.entities.active_layout = "Model"
    underlay = next(iter(site_plan.entities.underlays))
    assert underlay.definition is survey
    assert survey.references == {underlay.handle}


def test_active_layout_defaults_to_model():
    document = DrawingLoader().load_string("name: empty")
    assert document.entities.active_layout == "Model"
    assert len(document.entities.all) == 0


def test_load_from_file(tmp_path):
    path = tmp_path / "plan.yaml"
    path.write_text(SITE_PLAN)

    document = DrawingLoader().load(path)
    assert document.name == "site_plan"


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        DrawingLoader().load(tmp_path / "missing.yaml")


def test_image_size_read_from_file(tmp_path):
    PILImage.new("RGB", (40, 30)).save(tmp_path / "logo.png")
    path = tmp_path / "plan.yaml"
    path.write_text(
        "images:\n"
        "  logo: {file: logo.png}\n"
        "  photo: {file: photo.jpg, width: 640, height: 480}\n"
        "entities:\n"
        "  Model:\n"
        "    - {type: image, definition: logo, width: 4, height: 3}\n"
    )

    document = DrawingLoader().load(path)

    logo = document.image_definitions["logo"]
    assert (logo.width, logo.height) == (40, 30)
    assert document.image_definitions["photo"].width == 640
    assert next(iter(document.entities.images)).definition is logo


@pytest.mark.parametrize("yaml_string", [
    "entities:\n  Model:\n    - {type: blob}\n",
    "entities:\n  Model:\n    - {start: [0, 0, 0]}\n",
    "entities:\n  Model:\n    - {type: line, colour: 3}\n",
    "entities:\n  Model:\n    - {type: underlay, definition: nothing}\n",
    "underlays:\n  bad: {type: pdf, file: bad.dwf}\n",
    "underlays:\n  bad: {type: svg, file: bad.svg}\n",
    "underlays:\n  bad: {file: bad.pdf}\n",
    "blocks:\n  b:\n    attributes:\n      TAG: {colour: 1}\n",
    "- just\n- a list\n",
    "entities:\n  Model:\n    - line\n",
    "entities:\n  Model:\n    - {type: line, start: abc}\n",
    "entities:\n  Model: {type: line}\n",
    "entities: [1, 2]\n",
    "layouts:\n  - Sheet1\n",
    "layouts:\n  Sheet1: [block]\n",
    "underlays:\n  - {type: pdf, file: a.pdf}\n",
    "underlays:\n  bad: [pdf]\n",
    "images: logo.png\n",
    "images:\n  logo: {file: logo.png, width: wide, height: 3}\n",
    "blocks:\n  door: [line]\n",
    "blocks:\n  door:\n    entities: {type: line}\n",
    "entities:\n  Model:\n    - {type: underlay, definition: [survey]}\n",
    "name: [unclosed\n",
])
def test_malformed_definitions_are_rejected(yaml_string):
    with pytest.raises(InvalidArgumentError):
        DrawingLoader().load_string(yaml_string)


def test_entities_for_unknown_layout_are_rejected():
    with pytest.raises(LayoutNotFoundError):
        DrawingLoader().load_string("entities:\n  Nope:\n    - {type: line}\n")


def test_parse_entity_returns_unattached_entity(site_plan):
    entity = parse_entity({"type": "LINE", "start": [1, 1, 0]}, site_plan)
    assert isinstance(entity, Line)
    assert entity.owner is None
    assert entity.handle is None


def test_unreadable_image_is_rejected(tmp_path):
    (tmp_path / "logo.png").write_text("not an image")
    path = tmp_path / "plan.yaml"
    path.write_text("images:\n  logo: {file: logo.png}\n")

    with pytest.raises(InvalidArgumentError, match="logo"):
        DrawingLoader().load(path)
