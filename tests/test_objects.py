import pytest

from unitygen.model import DefinitionWrapper, StringEnum
from unitygen.objects import Object
from unitygen.properties import BooleanProperty, IntegerProperty, StringProperty

COMPOSED_CSHARP = """[System.Serializable]
public class CompositionThingy {

\t[JsonProperty("date")]
\tpublic string date;

\tpublic System.DateTime Date { get => System.DateTime.Parse(date); }

\t[JsonProperty("num")]
\tpublic int Num { get; private set; }

\t[JsonProperty("and anotha one")]
\tpublic string AndAnothaOne { get; private set; }

\t[JsonProperty("anotha one")]
\tpublic bool AnothaOne { get; private set; }

}"""


def test_object():
    prop = IntegerProperty("num", "")
    obj = Object("testObj", [prop])

    assert obj.all_properties() == [prop]
    assert obj.json_converter() == ""
    assert obj.to_variable_type() == "TestObj"
    assert obj.name == "testObj"
    assert obj.to_csharp() == """[System.Serializable]
public class TestObj {

\t[JsonProperty("num")]
\tpublic int Num { get; private set; }

}"""


def test_object_dates_correctly():
    obj = Object("testObj", [StringProperty("date", "date-time")])

    assert obj.to_variable_type() == "TestObj"
    assert obj.name == "testObj"
    assert obj.to_csharp() == """[System.Serializable]
public class TestObj {

\t[JsonProperty("date")]
\tpublic string date;

\tpublic System.DateTime Date { get => System.DateTime.Parse(date); }

}"""


def _four_props():
    return (
        IntegerProperty("num", ""),
        StringProperty("date", "date-time"),
        BooleanProperty("anotha one"),
        StringProperty("and anotha one", ""),
    )


def test_all_of_object():
    p1, p2, p3, p4 = _four_props()
    base = Object("testObj", [p1, p2])
    composed = Object.all_of("CompositionThingy", base, [p3, p4])

    props = composed.all_properties()
    assert len(props) == 4
    assert props[1] == p1
    assert props[0] == p2
    assert props[3] == p3
    assert props[2] == p4
    assert composed.json_converter() == ""
    assert composed.to_variable_type() == "CompositionThingy"
    assert composed.name == "CompositionThingy"
    assert composed.to_csharp() == COMPOSED_CSHARP


def test_can_set_all_of_object():
    p1, p2, p3, p4 = _four_props()
    base = Object("testObj", [p1, p2])
    composed = Object("CompositionThingy", [p3, p4])
    composed.set_all_of_object(base)

    props = composed.all_properties()
    assert len(props) == 4
    assert props[1] == p1
    assert props[0] == p2
    assert props[3] == p3
    assert props[2] == p4
    assert composed.json_converter() == ""
    assert composed.to_variable_type() == "CompositionThingy"
    assert composed.name == "CompositionThingy"
    assert composed.to_csharp() == COMPOSED_CSHARP


def test_object_can_set_child_and_parent():
    p0 = StringProperty("disc", "")
    p1, p2, p3, p4 = _four_props()

    parent = Object.with_discriminator("Parent", [p0, p1, p2], "disc")
    child = Object("Child", [p3, p4])
    child.set_what_to_inherit(parent)
    parent.add_child(child)

    props = child.all_properties()
    assert len(props) == 2
    assert props[1] == p3
    assert props[0] == p4
    assert child.json_converter() == ""
    assert child.to_variable_type() == "Child"
    assert child.name == "Child"
    assert parent.has_discriminator() is True
    assert child.has_discriminator() is False
    assert child.to_csharp() == """[System.Serializable]
public class Child : Parent {

\t[JsonProperty("and anotha one")]
\tpublic string AndAnothaOne { get; private set; }

\t[JsonProperty("anotha one")]
\tpublic bool AnothaOne { get; private set; }

}"""
    assert parent.to_csharp() == """[System.Serializable]
[JsonConverter(typeof(JsonSubtypes), "disc")]
[JsonSubtypes.KnownSubType(typeof(Child), "Child")]
public class Parent {

\t[JsonProperty("date")]
\tpublic string date;

\tpublic System.DateTime Date { get => System.DateTime.Parse(date); }

\t[JsonProperty("disc")]
\tpublic string Disc { get; private set; }

\t[JsonProperty("num")]
\tpublic int Num { get; private set; }

}"""


def test_parent_raises_with_missing_child():
    parent = Object.with_discriminator("Parent", [StringProperty("disc", "")], "disc")
    parent.add_child(None)

    with pytest.raises(ValueError) as excinfo:
        parent.to_csharp()
    assert str(excinfo.value) == "Parent was elected as parent class and provided a nil child"


def test_object_without_properties_renders_empty_class():
    assert Object("empty").to_csharp() == "[System.Serializable]\npublic class Empty {\n\n}"


@pytest.mark.parametrize(
    "definition",
    [
        StringEnum("cool cat", ["Mortimer"]),
        Object("some obj", [BooleanProperty("is cool")]),
    ],
)
def test_definition_wrapper_reference(definition):
    wrap = DefinitionWrapper(None)
    wrap.update_definition(definition)

    assert wrap.json_converter() == definition.json_converter()
    assert wrap.to_variable_type() == definition.to_variable_type()
    assert wrap.name == definition.name
    assert wrap.to_csharp() == definition.to_csharp()