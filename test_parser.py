# -*- coding: utf-8 -*-
import io
import logging

import numpy as np
import pytest

from conftest import TRIANGLE_OBJ
from objscope.obj import ErrorType, ObjParseError, parse_obj
from objscope.utils.loader import load_obj


def _error(parse, text) -> ObjParseError:
    with pytest.raises(ObjParseError) as err:
        parse(text)
    return err.value


@pytest.mark.parametrize("fields", ["0 0 0", "0 0 0 1", "0 0 0 1 0.5 0.25"])
def test_vertex_valid_field_counts(parse, fields):
    model = parse(f"v {fields}\nv 1 0 0\nv 0 1 0\nf 1 2 3\n")
    assert len(model.vertices) == 3


@pytest.mark.parametrize("fields", ["0", "0 0", "0 0 0 1 2", "0 0 0 1 2 3 4"])
def test_vertex_invalid_field_counts(parse, fields):
    err = _error(parse, f"v {fields}\n")
    assert err.err_type is ErrorType.INVALID_PARAMETER_NUMBER
    assert err.line_no == 0


@pytest.mark.parametrize("text,position", [
    ("v 1 abc 3\n", 1),
    ("v \u0661 0 0\n", 0),
    ("v 1 1_0 3\n", 1),
    ("v 1 2 \uff13\n", 2),
    ("v 1 2 3e\n", 2),
    ("v 1 . 3\n", 1),
])
def test_vertex_unparsable_field(parse, text, position):
    err = _error(parse, text)
    assert err.err_type is ErrorType.INVALID_PARAMETER
    assert err.value == position


def test_vertex_float_forms(parse):
    model = parse("v -1.5 +2. .25e1\nv 1E-1 0 0\nv 0 1 0\nf 1 2 3\n")
    assert len(model.vertices) == 3


def test_vertex_w_component_warns(parse, caplog):
    with caplog.at_level(logging.WARNING, logger="objscope"):
        parse("v 0 0 0 1\n")
    assert any("w component ignored" in r.getMessage() for r in caplog.records)


def test_round_trip_triangle(parse):
    model = parse(TRIANGLE_OBJ)
    assert len(model.vertices) == 3
    assert model.indices.tolist() == [0, 1, 2]
    assert model.indices.dtype == np.uint32
    for v in model.vertices:
        assert len(v.texture_coordinates) == 2
        assert all(np.isfinite(v.texture_coordinates))


def test_negative_indices_match_positive(parse):
    head = "v 0 0 0\nv 1 0 0\nv 0 1 0\n"
    negative = parse(head + "f -1 -2 -3\n")
    positive = parse(head + "f 3 2 1\n")
    assert negative.indices.tolist() == positive.indices.tolist()
    assert np.array_equal(negative.vertex_buffer(), positive.vertex_buffer())


def test_negative_index_is_relative_to_current_line(parse):
    model = parse("""\
        v 0 0 0
        v 1 0 0
        v 0 1 0
        f -3 -2 -1
        v 5 5 5
        f -4 -3 -2
    """)
    # обе грани ссылаются на вершины 1, 2, 3
    assert model.indices.tolist() == [0, 1, 2, 0, 1, 2]


def test_face_too_few_references(parse):
    err = _error(parse, TRIANGLE_OBJ + "f 1 2\n")
    assert err.err_type is ErrorType.INVALID_PARAMETER_NUMBER
    assert err.line_no == 4


def test_face_index_out_of_bound(parse):
    err = _error(parse, "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 99\n")
    assert err.err_type is ErrorType.INDEX_OUT_OF_BOUND
    assert err.value == 99
    assert err.line_no == 3
    assert err.line == "f 1 2 99"
    assert str(err) == "3:f 1 2 99 : Index 99 is out of bound"


def test_face_before_vertices_is_out_of_bound(parse):
    err = _error(parse, "f 1 2 3\nv 0 0 0\nv 1 0 0\nv 0 1 0\n")
    assert err.err_type is ErrorType.INDEX_OUT_OF_BOUND
    assert err.value == 1


def test_face_zero_index(parse):
    err = _error(parse, TRIANGLE_OBJ + "f 0 1 2\n")
    assert err.err_type is ErrorType.INDEX_OUT_OF_BOUND
    assert err.value == 0


def test_face_shape_mismatch(parse):
    err = _error(parse, """\
        v 0 0 0
        v 1 0 0
        v 0 1 0
        vt 0 0
        f 1/1 2/1 3
    """)
    assert err.err_type is ErrorType.INVALID_PARAMETER
    assert err.value == 2


def test_face_malformed_token(parse):
    err = _error(parse, TRIANGLE_OBJ + "f 1 x 3\n")
    assert err.err_type is ErrorType.INVALID_PARAMETER
    assert err.value == 1


def test_quad_is_fan_triangulated(parse):
    model = parse("""\
        v 0 0 0
        v 1 0 0
        v 1 1 0
        v 0 1 0
        f 1 2 3 4
    """)
    assert model.indices.tolist() == [0, 1, 2, 0, 2, 3]
    assert len(model.vertices) == 4


def test_pentagon_shares_first_vertex(parse):
    model = parse("""\
        v 0 0 0
        v 1 0 0
        v 2 1 0
        v 1 2 0
        v 0 1 0
        f 1 2 3 4 5
    """)
    tris = model.indices.reshape(-1, 3)
    assert len(tris) == 3
    assert all(t[0] == 0 for t in tris)


def test_repeated_triple_is_deduplicated(parse):
    model = parse("""\
        v 0 0 0
        v 1 0 0
        v 0 1 0
        v 1 1 0
        vt 0 0
        vt 1 0
        vt 0 1
        vt 1 1
        vn 0 0 1
        f 1/1/1 2/2/1 3/3/1
        f 2/2/1 4/4/1 3/3/1
    """)
    assert len(model.vertices) == 4
    assert model.indices.tolist() == [0, 1, 2, 1, 3, 2]


def test_same_position_different_texture_is_a_new_vertex(parse):
    model = parse("""\
        v 0 0 0
        v 1 0 0
        v 0 1 0
        vt 0 0
        vt 1 1
        f 1/1 2/1 3/1
        f 1/2 2/1 3/1
    """)
    assert len(model.vertices) == 4
    assert model.indices.tolist() == [0, 1, 2, 3, 1, 2]


def test_texture_coordinates_taken_verbatim(parse):
    model = parse("""\
        v 0 0 0
        v 1 0 0
        v 0 1 0
        vt 0.25 0.5
        vt 0.75 0.5
        vt 0.5 1.0 0.0
        f 1/1 2/2 3/3
    """)
    uvs = [v.texture_coordinates for v in model.vertices]
    assert uvs == [(0.25, 0.5), (0.75, 0.5), (0.5, 1.0)]


def test_missing_texture_with_vt_table_falls_back_to_zero(parse):
    model = parse("""\
        v 0 0 0
        v 1 0 0
        v 0 1 0
        vt 0.5 0.5
        f 1 2 3
    """)
    assert all(v.texture_coordinates == (0.0, 0.0) for v in model.vertices)


def test_vertex_colors(parse):
    model = parse("""\
        v 0 0 0 1 0 0
        v 1 0 0 0 1 0
        v 0 1 0
        f 1 2 3
    """)
    colors = [v.color.to_tuple() for v in model.vertices]
    assert colors == [(1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 0.0)]


@pytest.mark.parametrize("line", ["vt 1", "vt 1 2 3 4", "vn 0 1", "vn 0 0 1 0"])
def test_texcoord_and_normal_field_counts(parse, line):
    err = _error(parse, line + "\n")
    assert err.err_type is ErrorType.INVALID_PARAMETER_NUMBER


def test_normals_are_not_required_to_be_unit(parse):
    model = parse(TRIANGLE_OBJ.replace("f 1 2 3", "vn 0 0 5\nf 1//1 2//1 3//1"))
    assert len(model.vertices) == 3


def test_comments_blank_lines_and_crlf(parse):
    model = parse("# header\r\n\r\nv 0 0 0\r\nv 1 0 0\r\n   \nv 0 1 0\r\nf 1 2 3\r\n")
    assert model.indices.tolist() == [0, 1, 2]


@pytest.mark.parametrize("directive", ["g cube", "o cube", "mtllib cube.mtl", "usemtl red"])
def test_ignored_directives_warn(parse, caplog, directive):
    with caplog.at_level(logging.WARNING, logger="objscope"):
        model = parse(directive + "\n" + TRIANGLE_OBJ)
    assert len(model.vertices) == 3
    assert any("not implemented" in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize("directive", ["p", "l", "curv", "curv2D", "surf", "mg", "parm",
                                       "trim", "hole", "scrv", "sp", "end", "con"])
def test_unsupported_directives(parse, directive):
    err = _error(parse, f"{directive} 1 2\n")
    assert err.err_type is ErrorType.UNSUPPORTED
    assert err.value == directive


def test_smoothing_group(parse):
    assert len(parse("s off\n" + TRIANGLE_OBJ).vertices) == 3
    assert _error(parse, "s on\n").err_type is ErrorType.UNSUPPORTED
    assert _error(parse, "s 1\n").err_type is ErrorType.INVALID_ENTRY
    assert _error(parse, "s off on\n").err_type is ErrorType.INVALID_PARAMETER_NUMBER


def test_unknown_keyword(parse):
    err = _error(parse, "bogus 1 2 3\n")
    assert err.err_type is ErrorType.INVALID_ENTRY
    assert err.value == "bogus"
    assert str(err) == "0:bogus 1 2 3 : Invalid entry type : 'bogus'"


def test_line_without_separator(parse):
    err = _error(parse, TRIANGLE_OBJ + "v\n")
    assert err.err_type is ErrorType.INVALID_LINE
    assert err.line_no == 4


def test_read_failure_is_io_error():
    def lines():
        yield "v 0 0 0\n"
        raise OSError("disk gone")

    with pytest.raises(ObjParseError) as err:
        parse_obj(lines())
    assert err.value.err_type is ErrorType.IO_ERROR
    assert err.value.line is None
    assert err.value.line_no == 1
    assert str(err.value) == "1: disk gone"


def test_invalid_utf8_is_io_error():
    with pytest.raises(ObjParseError) as err:
        parse_obj(io.BytesIO(b"v 0 0 0\nv \xff 0 0\n"))
    assert err.value.err_type is ErrorType.IO_ERROR


def test_parse_is_deterministic(parse):
    text = """\
        v -1 -1 -1
        v 1 -1 -1
        v 1 1 -1
        v -1 1 1
        f 1 2 3 4
        f 4 3 2
    """
    a, b = parse(text), parse(text)
    assert np.array_equal(a.vertex_buffer(), b.vertex_buffer())
    assert np.array_equal(a.index_buffer(), b.index_buffer())


def test_empty_input(parse):
    model = parse("")
    assert model.vertices == []
    assert model.indices.tolist() == []
    assert model.vertex_buffer().shape == (0, 8)


def test_load_obj_from_file(obj_file):
    model = load_obj(obj_file(TRIANGLE_OBJ))
    assert len(model.vertices) == 3


def test_load_obj_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_obj(tmp_path / "nope.obj")


def test_load_obj_lone_cr_is_not_a_line_break(tmp_path):
    path = tmp_path / "cr.obj"
    path.write_bytes(b"v 0 0 0\rv 1 0 0\n")
    with pytest.raises(ObjParseError) as info:
        load_obj(path)
    assert info.value.err_type is ErrorType.INVALID_PARAMETER_NUMBER
    assert info.value.line_no == 0


def test_load_obj_crlf_file(tmp_path):
    path = tmp_path / "crlf.obj"
    path.write_bytes(b"v 0 0 0\r\nv 1 0 0\r\nv 0 1 0\r\nf 1 2 3\r\n")
    model = load_obj(path)
    assert model.triangle_count == 1
