import json

import pytest

from datagen_client.fields import (
    Field,
    FieldType,
    GenerationRequest,
    ValidationError,
    default_params,
)


def _compact(obj):
    return json.dumps(obj, sort_keys=True, separators=(",", ":"))


def test_request_defaults():
    request = GenerationRequest()
    assert request.table_name == "users"
    assert request.rows == 10
    assert request.output_file == "output.csv"
    assert request.fields == []


def test_new_field_is_int_with_min_and_max():
    field = Field()
    assert field.type is FieldType.INT
    assert field.params == {"min": 1, "max": 100}
    assert [kind.value for kind in FieldType] == ["int", "double", "string", "name"]


def test_default_params_per_type():
    assert default_params("int") == {"min": 1, "max": 100}
    assert default_params(FieldType.DOUBLE) == {"min": 1, "max": 100}
    assert default_params("string") == {"length": 10}
    assert default_params("name") == {}


def test_default_params_unknown_type():
    with pytest.raises(ValueError):
        default_params("date")


def test_field_type_change():
    field = Field()
    field.params["min"] = 5
    field.set_type("int")
    assert field.params["min"] == 5

    field.set_type("double")
    assert set(field.params) == {"min", "max"}

    field.set_type("string")
    assert "length" in field.params
    assert "min" not in field.params

    field.set_type("name")
    assert field.params == {}
    assert field.to_json() == {"name": "", "type": "name"}


def test_set_type_rejects_unknown():
    field = Field()
    with pytest.raises(ValueError):
        field.set_type("blob")
    assert field.type is FieldType.INT


def test_json_body_generation():
    first = Field(name="id")
    first.set_type("int")
    first.params["min"] = 1
    first.params["max"] = 1000
    second = Field()
    second.set_type("string")
    second.name = "name"
    second.params["length"] = 10
    request = GenerationRequest(
        table_name="users", rows=10, output_file="users.csv", fields=[first, second]
    )
    expected = (
        '{"fields":[{"name":"id","params":{"max":"1000","min":"1"},"type":"int"},'
        '{"name":"name","params":{"length":"10"},"type":"string"}],'
        '"output_file":"users.csv","rows":10,"table_name":"users"}'
    )
    assert _compact(request.to_json()) == expected


def test_params_are_clamped_to_spin_ranges():
    field = Field(name="n", params={"min": -5_000_000, "max": 5_000_000})
    assert field.to_json()["params"] == {"min": "-1000000", "max": "1000000"}
    text = Field(name="s", type="string", params={"length": 0})
    assert text.to_json()["params"] == {"length": "1"}


def test_rows_are_clamped():
    assert GenerationRequest(rows=0).to_json()["rows"] == 1
    assert GenerationRequest(rows=50_000).to_json()["rows"] == 10000


def test_missing_params_give_empty_object():
    field = Field(name="x", params={"min": 3})
    assert field.to_json()["params"] == {}


def test_validation_empty_table_name():
    request = GenerationRequest(table_name="", fields=[Field(name="id")])
    with pytest.raises(ValidationError, match="Table name cannot be empty."):
        request.validate()


def test_validation_no_fields():
    request = GenerationRequest(table_name="users")
    with pytest.raises(ValidationError, match="At least one field is required."):
        request.validate()


def test_validation_empty_field_name():
    request = GenerationRequest(fields=[Field()])
    with pytest.raises(ValidationError) as info:
        request.validate()
    assert str(info.value) == "Field name in row 1 cannot be empty."
    assert info.value.title == "Input Error"


def test_validation_reports_row_number():
    request = GenerationRequest(fields=[Field(name="a"), Field(name="b"), Field()])
    with pytest.raises(ValidationError, match="row 3"):
        request.validate()


def test_validation_passes_for_complete_request():
    request = GenerationRequest(fields=[Field(name="id")])
    request.validate()
    assert request.to_json()["fields"][0]["name"] == "id"