"""Tests for the document tables, handles and entity bookkeeping."""

import numpy as np
import pytest
from PIL import Image as PILImage

from cadmodel import Document, InvalidArgumentError, TableObjectNotFoundError
from cadmodel.entities import (
    AttributeDefinition,
    Dimension,
    DimensionType,
    Hatch,
    Image,
    Insert,
    Line,
    LwPolyline,
    Underlay,
)
from cadmodel.objects import ImageDefinition, UnderlayPdfDefinition


def test_new_document_has_model_and_paper_space():
    doc = Document()
    assert doc.layouts.names() == ["Model", "Layout1"]
    assert doc.layouts["Model"].block_name == "*Model_Space"
    assert doc.layouts["Model"].is_model_space
    assert doc.blocks["*Paper_Space"].layout == "Layout1"


def test_tables_objects_get_handles():
    doc = Document()
    for obj in [*doc.layouts, *doc.blocks]:
        assert obj.handle is not None
        assert doc.get_object(obj.handle) is obj


def test_handles_are_upper_case_hex():
    doc = Document()
    handles = [doc.allocate_handle() for _ in range(20)]
    assert len(set(handles)) == 20
    assert all(h == h.upper() for h in handles)
    assert all(int(h, 16) > 0 for h in handles)


def test_add_layout_creates_backing_block():
    doc = Document()
    layout = doc.add_layout("Sheet2")
    assert layout.block_name == "*Paper_Space0"
    assert layout.tab_order == 2
    assert doc.blocks[layout.block_name].layout == "Sheet2"

    layout = doc.add_layout("Sheet3")
    assert layout.block_name == "*Paper_Space1"


def test_duplicate_layout_is_rejected():
    doc = Document()
    with pytest.raises(InvalidArgumentError):
        doc.add_layout("Model")


def test_layout_block_lookup():
    doc = Document()
    assert doc.layout_block("Layout1").name == "*Paper_Space"
    with pytest.raises(TableObjectNotFoundError):
        doc.layout_block("Nope")


def test_block_definition_is_not_a_layout_block():
    doc = Document()
    block = doc.add_block("door")
    assert not block.is_layout_block
    with pytest.raises(InvalidArgumentError):
        doc.add_block("door")


def test_block_of_other_document_cannot_take_entities():
    doc = Document()
    other = Document()
    block = other.add_block("door")

    with pytest.raises(InvalidArgumentError):
        block.add_entity(doc, Line())
    assert len(block.entities) == 0


def test_block_remove_entity_clears_attachment():
    doc = Document()
    block = doc.add_block("door")
    line = block.add_entity(doc, Line())
    handle = line.handle

    assert block.remove_entity(doc, line) is True
    assert line.owner is None
    assert line.handle is None
    assert handle not in doc.added_objects
    assert block.remove_entity(doc, line) is False


def test_attribute_definitions_are_keyed_by_tag():
    doc = Document()
    block = doc.add_block("title")
    block.add_attribute_definition(AttributeDefinition(tag="DATE", prompt="Date"))

    with pytest.raises(InvalidArgumentError):
        block.add_attribute_definition(AttributeDefinition(tag="DATE"))

    assert block.remove_attribute_definition("DATE") is True
    assert block.remove_attribute_definition("DATE") is False


def test_attribute_definition_tag_cannot_contain_spaces():
    with pytest.raises(InvalidArgumentError):
        AttributeDefinition(tag="TWO WORDS")


def test_underlay_registers_definition():
    doc = Document()
    definition = UnderlayPdfDefinition("survey.pdf")
    underlay = doc.entities.add(Underlay(definition=definition))

    assert doc.underlay_definitions["survey"] is definition
    assert definition.handle is not None
    assert definition.references == {underlay.handle}

    doc.entities.remove(underlay)
    assert definition.references == set()
    assert "survey" in doc.underlay_definitions


def test_shared_definition_tracks_every_underlay():
    doc = Document()
    definition = UnderlayPdfDefinition("survey.pdf")
    first = doc.entities.add(Underlay(definition=definition))
    second = doc.entities.add(Underlay(definition=definition, position=[10, 0, 0]))

    assert definition.references == {first.handle, second.handle}
    assert len(doc.underlay_definitions) == 1


def test_conflicting_definition_name_is_rejected_without_changes():
    doc = Document()
    doc.add_underlay_definition(UnderlayPdfDefinition("a/survey.pdf"))
    underlay = Underlay(definition=UnderlayPdfDefinition("b/survey.pdf"))
    object_count = len(doc.added_objects)

    with pytest.raises(InvalidArgumentError, match="survey"):
        doc.entities.add(underlay)

    assert underlay.owner is None
    assert underlay.handle is None
    assert len(doc.added_objects) == object_count
    assert list(doc.entities.underlays) == []


def test_definition_of_another_document_is_rejected_without_changes():
    first = Document("a")
    second = Document("b")
    second.entities.add(Line())
    definition = UnderlayPdfDefinition("site.pdf")
    first.entities.add(Underlay(definition=definition))
    handle, references = definition.handle, set(definition.references)
    object_count = len(second.added_objects)

    underlay = Underlay(definition=definition)
    with pytest.raises(InvalidArgumentError, match="another document"):
        second.entities.add(underlay)

    assert underlay.owner is None
    assert definition.handle == handle
    assert definition.references == references
    assert first.added_objects[definition.handle] is definition
    assert len(second.added_objects) == object_count
    assert "site" not in second.underlay_definitions


def test_registering_definition_of_another_document_is_rejected():
    first = Document("a")
    definition = first.add_image_definition(ImageDefinition("logo.png", 40, 30))

    with pytest.raises(InvalidArgumentError, match="another document"):
        Document("b").add_image_definition(definition)
    assert first.get_object(definition.handle) is definition


def test_underlay_requires_definition():
    with pytest.raises(InvalidArgumentError):
        Underlay()


@pytest.mark.parametrize("contrast,fade", [(10, 0), (50, 90)])
def test_underlay_display_ranges(contrast, fade):
    with pytest.raises(InvalidArgumentError):
        Underlay(definition=UnderlayPdfDefinition("a.pdf"), contrast=contrast, fade=fade)


def test_image_registers_definition():
    doc = Document()
    definition = ImageDefinition("photos/site.jpg", 640, 480)
    image = doc.entities.add(Image(definition=definition, width=6.4, height=4.8))

    assert doc.image_definitions["site"] is definition
    assert definition.references == {image.handle}
    assert list(doc.entities.images) == [image]


def test_image_definition_from_file(tmp_path):
    path = tmp_path / "logo.png"
    PILImage.new("RGB", (32, 16)).save(path, dpi=(150, 150))

    definition = ImageDefinition.from_file(path)

    assert definition.name == "logo"
    assert (definition.width, definition.height) == (32, 16)
    assert definition.horizontal_resolution == pytest.approx(150, rel=1e-2)


def test_image_definition_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ImageDefinition.from_file(tmp_path / "missing.png")


def test_image_definition_size_must_be_positive():
    with pytest.raises(InvalidArgumentError):
        ImageDefinition("a.png", 0, 10)


def test_insert_requires_block_name():
    with pytest.raises(InvalidArgumentError):
        Insert()


def test_clone_is_unattached_copy():
    doc = Document()
    line = doc.entities.add(Line(start=[1, 2, 3], end=[4, 5, 6], layer="walls"))
    line.add_reactor("AA")

    copy = line.clone()

    assert copy is not line
    assert copy.owner is None
    assert copy.handle is None
    assert copy.reactors == []
    assert copy.layer == "walls"
    np.testing.assert_array_equal(copy.start, line.start)
    assert copy.start is not line.start

    doc.entities.add(copy)
    assert copy.handle != line.handle


def test_clone_shares_definition():
    definition = UnderlayPdfDefinition("survey.pdf")
    underlay = Underlay(definition=definition)
    assert underlay.clone().definition is definition


def test_clone_copies_nested_data():
    hatch = Hatch(boundary_paths=[[[0, 0], [1, 0], [1, 1]]])
    copy = hatch.clone()
    copy.boundary_paths[0][0, 0] = 5.0
    assert hatch.boundary_paths[0][0, 0] == 0.0


def test_entities_compare_by_identity():
    a = Line(start=[0, 0, 0], end=[1, 0, 0])
    b = Line(start=[0, 0, 0], end=[1, 0, 0])
    assert a != b
    assert a == a


def test_reactors_are_unique():
    line = Line()
    line.add_reactor("1F")
    line.add_reactor("1F")
    assert line.reactors == ["1F"]
    assert line.remove_reactor("1F") is True
    assert line.remove_reactor("1F") is False


def test_lwpolyline_default_bulges():
    polyline = LwPolyline(vertices=[[0, 0], [1, 0], [1, 1]])
    assert polyline.vertices.shape == (3, 2)
    assert polyline.bulges == [0.0, 0.0, 0.0]


def test_dimension_type_from_string():
    assert Dimension(dimension_type="radius").dimension_type is DimensionType.RADIUS
    with pytest.raises(InvalidArgumentError):
        Dimension(dimension_type="curved")
