from lightyears.objects import Object


def test_new_object_is_not_pending():
    assert Object().is_pending_destroy() is False


def test_destroy_marks_object_pending():
    obj = Object()
    obj.destroy()
    assert obj.is_pending_destroy() is True


def test_destroy_is_idempotent():
    obj = Object()
    obj.destroy()
    obj.destroy()
    assert obj.is_pending_destroy() is True


def test_destroy_affects_only_that_object():
    first, second = Object(), Object()
    first.destroy()
    assert first.is_pending_destroy() is True
    assert second.is_pending_destroy() is False


def test_subclass_inherits_destroy():
    class Thing(Object):
        pass

    thing = Thing()
    plain = Object()
    Object.destroy(thing)
    assert Object.is_pending_destroy(thing) is True
    assert plain.is_pending_destroy() is False