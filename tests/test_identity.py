import copy

from boot import Boot, Identity, ObjUtil


def test_identity_draws_next_counter_value():
    ident = Identity.cur()
    first = ident.peek()
    assert ident.of(object.__new__(type("T", (), {}))) == first
    assert ident.peek() == first + 1


def test_identity_is_stable_and_unique():
    ident = Identity()

    class T:
        pass

    a, b = T(), T()
    ha = ident.of(a)
    assert ident.of(a) == ha
    assert ident.of(b) != ha


def test_identity_for_objects_without_dict():
    ident = Identity()

    class Slotted:
        __slots__ = ("x",)

    a, b = Slotted(), Slotted()
    ha, hb = ident.of(a), ident.of(b)
    assert ha != hb
    assert ident.of(a) == ha


def test_instance_hash_code_is_idempotent(shapes):
    shape, _ = shapes
    s = shape("x", 0)
    assert s.hashCode() == s.hashCode()
    assert hash(s) == hash(s.hashCode())


def test_distinct_instances_never_collide(shapes):
    shape, circle = shapes
    objs = [shape("x", 0) for _ in range(20)] + [circle(1, 1) for _ in range(20)]
    assert len({o.hashCode() for o in objs}) == len(objs)


def test_identity_follows_first_request_order(runtime, shapes):
    shape, _ = shapes
    early = shape("early", 0)
    late = shape("late", 0)
    first = runtime.identity.peek()
    assert late.hashCode() == first
    assert early.hashCode() == first + 1


def test_copy_does_not_carry_identity(shapes):
    _, circle = shapes
    c = circle(2, 1)
    h = c.hashCode()

    shallow = copy.copy(c)
    deep = copy.deepcopy(c)
    assert shallow.r == 2 and deep.r == 2
    assert shallow.hashCode() != h
    assert deep.hashCode() != h
    assert deep.hashCode() != shallow.hashCode()
    assert c.hashCode() == h


def test_equals_is_reference_equality(shapes):
    shape, _ = shapes
    a = shape("same", 0)
    b = shape("same", 0)
    assert a.equals(a)
    assert not a.equals(b)
    assert a == a and a != b


def test_instances_work_as_dict_keys(shapes):
    shape, _ = shapes
    a, b = shape("a", 0), shape("b", 0)
    table = {a: "a", b: "b"}
    assert table[a] == "a" and table[b] == "b"


def test_to_string(shapes):
    shape, circle = shapes
    c = circle(1, 1)
    assert c.toString() == f"Circle#{c.hashCode()}"
    assert str(c) == c.toString()
    s = shape("s", 0)
    assert repr(s) == f"Shape#{s.hashCode()}"


def test_obj_util_dispatch(runtime, shapes):
    shape, _ = shapes
    s = shape("s", 0)
    assert ObjUtil.hashCode(None) == 0
    assert ObjUtil.hashCode("abc") == 96354
    assert ObjUtil.hashCode(7) == 7
    assert ObjUtil.hashCode(s) == s.hashCode()

    plain = object.__new__(type("Plain", (), {}))
    h = ObjUtil.hashCode(plain)
    assert ObjUtil.hashCode(plain) == h

    assert ObjUtil.equals(None, None)
    assert not ObjUtil.equals(s, None)
    assert ObjUtil.equals("ab", "ab")
    assert ObjUtil.equals(s, s)

    assert ObjUtil.toString(None) == "null"
    assert ObjUtil.toString(True) == "true"
    assert ObjUtil.toString(s) == s.toString()


def test_identity_is_shared_across_runtimes():
    first = Boot(namespace="boot")
    second = Boot(namespace="boot")
    assert first.identity is second.identity

    a = first.define("A", "", {"$0": lambda self: None})(0)
    b = second.define("A", "", {"$0": lambda self: None})(0)
    assert a.hashCode() != b.hashCode()
    assert ObjUtil.hashCode(a) != ObjUtil.hashCode(b)
    assert len({a, b}) == 2


def test_all_identity_handles_share_one_counter():
    first, second = Identity(), Identity()
    ha = first.of(object.__new__(type("T", (), {})))
    hb = second.of(object.__new__(type("T", (), {})))
    assert hb == ha + 1
