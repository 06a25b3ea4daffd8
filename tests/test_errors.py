import pytest

from bplustree.errors import BPlusTreeError, BuildError, InsertError


def test_insert_error_default_message():
    assert str(InsertError()) == "Insertion failed."


def test_build_error_default_message():
    assert str(BuildError()) == "No data received."


@pytest.mark.parametrize(
    ("cls", "message"),
    [(BuildError, "No data received."), (InsertError, "Insertion failed.")],
)
def test_subclasses_share_base(cls, message):
    with pytest.raises(BPlusTreeError) as info:
        raise cls()
    assert type(info.value) is cls
    assert str(info.value) == message


def test_custom_message_replaces_default():
    assert str(InsertError("disk full")) == "disk full"


def _handler_for(error):
    try:
        raise error
    except InsertError:
        return "insert"
    except BuildError:
        return "build"


def test_build_and_insert_are_distinct():
    assert _handler_for(BuildError()) == "build"
    assert _handler_for(InsertError()) == "insert"
    assert not issubclass(BuildError, InsertError)
    assert not issubclass(InsertError, BuildError)