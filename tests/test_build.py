from textwrap import dedent

import pytest

from gogetters.build import build_accessor_model
from gogetters.errors import AccessorCollisionError, UnsupportedFieldError, UnsupportedFieldTypeError
from gogetters.goparse import parse_source
from gogetters.model import AccessorField, ImportRef
from gogetters.naming import export_unicode
from gogetters.scan import scan_declarations


def _model(body, imports="", **kwargs):
	text = f"package p\n\n{imports}\n\n//go:generate getters\n{body}\n"
	return build_accessor_model(scan_declarations(parse_source(dedent(text))), **kwargs)


def test_user_scenario():
	model = _model(
		dedent(
			"""\
			type User struct {
				id       uuid.UUID
				name     string
				age      int
				children []User
			}"""
		),
		imports='import "github.com/google/uuid"',
	)
	assert model.package_name == "p"
	assert [(f.method_name, f.field_type) for f in model.fields] == [
		("Id", "uuid.UUID"),
		("Name", "string"),
		("Age", "int"),
		("Children", "[]User"),
	]
	assert model.fields[0] == AccessorField(
		owner_type_name="User", method_name="Id", field_name="id", field_type="uuid.UUID"
	)
	assert model.imports == [ImportRef(path="github.com/google/uuid")]


def test_fields_flattened_across_declarations_in_order():
	model = _model(
		dedent(
			"""\
			type (
				A struct {
					b int
					a int
				}
				B struct {
					z *time.Time
				}
			)"""
		),
		imports='import (\n\t"fmt"\n\t"time"\n)',
	)
	assert [(f.owner_type_name, f.field_name) for f in model.fields] == [("A", "b"), ("A", "a"), ("B", "z")]
	# only reachable through a pointer, still imported
	assert model.imports == [ImportRef(path="time")]


def test_empty_struct_yields_no_accessors():
	model = _model("type Empty struct{}")
	assert model.fields == []
	assert model.imports == []


def test_generic_owner_receiver():
	model = _model("type Pair[K comparable, V any] struct {\n\tkey K\n\tval V\n}")
	assert [f.receiver for f in model.fields] == ["Pair[K, V]", "Pair[K, V]"]
	assert model.fields[0].field_type == "K"


def test_embedded_field_rejected():
	with pytest.raises(UnsupportedFieldError, match="embedded"):
		_model("type A struct {\n\tBase\n}")


def test_multi_name_field_rejected():
	with pytest.raises(UnsupportedFieldError, match="multiple names"):
		_model("type A struct {\n\tx, y int\n}")


def test_function_field_rejected():
	with pytest.raises(UnsupportedFieldTypeError, match=r"A\.cb"):
		_model("type A struct {\n\tcb func() error\n}")


def test_inline_struct_field_rejected():
	with pytest.raises(UnsupportedFieldTypeError, match="struct"):
		_model("type A struct {\n\tinner struct{ x int }\n}")


def test_accessor_colliding_with_field_rejected():
	with pytest.raises(AccessorCollisionError, match=r"A\.Name"):
		_model("type A struct {\n\tname string\n\tName string\n}")


def test_accessors_colliding_with_each_other_rejected():
	with pytest.raises(AccessorCollisionError, match="accessor for field"):
		_model("type A struct {\n\tss int\n\tß int\n}", export_name=lambda n: n[0].upper() + n[1:] if n != "ß" else "Ss")


def test_collisions_allowed_on_request():
	model = _model("type A struct {\n\tname string\n\tName string\n}", allow_collisions=True)
	assert [f.method_name for f in model.fields] == ["Name", "Name"]


def test_export_strategy_is_injectable():
	model = _model("type A struct {\n\tüber int\n}", export_name=export_unicode)
	assert model.fields[0].method_name == "Über"


def test_legacy_chan_spelling():
	model = _model("type A struct {\n\tc chan int\n}", legacy_chan_spelling=True)
	assert model.fields[0].field_type == "chann int"


def test_receiver_name_avoids_type_parameters():
	model = _model("type Box[n any, n0 comparable] struct {\n\tval n\n}")
	assert model.fields[0].receiver == "Box[n, n0]"
	assert model.fields[0].receiver_name == "n1"
	assert _model("type A struct {\n\tx int\n}").fields[0].receiver_name == "n"
