"""
Structured object renderer tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel

from easylog.formatting.layout import FOOTER, HeaderStyle
from easylog.formatting.objects import ObjectRenderer, render_object
from easylog.formatting.options import FormatOptions

MODULE = __name__


@dataclass
class Address:
    city: str
    street: str


@dataclass
class User:
    name: str
    age: int
    address: Address
    tags: list[str] = field(default_factory=list)


@dataclass
class Link:
    name: str
    next: Link | None = None


@dataclass
class Profile:
    a: int = 1
    b: int = 2
    c: int = 3
    d: int = 4
    e: int = 5
    f: int = 6


@dataclass
class Wrapper:
    id: int
    profile: Profile


@dataclass
class Item:
    sku: str


@dataclass
class Order:
    items: list[Item]


@dataclass
class Holder:
    values: list[int]


class Account(BaseModel):
    owner: str
    balance: float = 0.0


class Sensor:
    def __init__(self) -> None:
        self.id = 1

    @property
    def reading(self) -> float:
        raise OSError("offline")


class Broken:
    def __easylog_fields__(self):
        raise RuntimeError("introspection failed")

    def __str__(self) -> str:
        return "Broken!"


class Empty:
    pass


class Money:
    __slots__ = ("cents",)

    def __init__(self, cents: int) -> None:
        self.cents = cents


class Node:
    def __init__(self, name: str) -> None:
        self.name = name
        self.parent: Node | None = None


def chain(length: int) -> Link:
    head = Link(f"l{length - 1}")
    for index in range(length - 2, -1, -1):
        head = Link(f"l{index}", head)
    return head


class TestFieldRendering:
    def test_nested_object_and_sequence(self) -> None:
        user = User("Ada", 36, Address("Lagos", "Broad St"), ["admin", "ops"])

        assert render_object(user).splitlines() == [
            f"╭─ User ({MODULE})",
            "├─ address: Address",
            '│  ├─ city: "Lagos"',
            '│  ╰─ street: "Broad St"',
            "├─ age: 36",
            '├─ name: "Ada"',
            "╰─ tags: List[2]",
            '│  ├─ [0]: "admin"',
            '│  ╰─ [1]: "ops"',
        ]

    def test_fields_sorted_by_name(self) -> None:
        assert render_object({"b": 2, "a": 1}).splitlines() == ["╭─ dict", "├─ a: 1", "╰─ b: 2"]

    def test_null_field(self) -> None:
        assert render_object(Link("solo")).splitlines()[-1] == "╰─ next: null"

    def test_pydantic_model(self) -> None:
        assert render_object(Account(owner="ada", balance=2.5)).splitlines() == [
            f"╭─ Account ({MODULE})",
            "├─ balance: 2.5",
            '╰─ owner: "ada"',
        ]

    def test_slots(self) -> None:
        assert render_object(Money(5)).splitlines() == [f"╭─ Money ({MODULE})", "╰─ cents: 5"]

    def test_exception_fields(self) -> None:
        assert render_object(ValueError("bad")).splitlines() == [
            "╭─ ValueError",
            "├─ args: Tuple[1]",
            '│  ╰─ [0]: "bad"',
            '╰─ message: "bad"',
        ]

    def test_structured_items_inside_nested_sequence(self) -> None:
        assert render_object(Order([Item("a")])).splitlines() == [
            f"╭─ Order ({MODULE})",
            "╰─ items: List[1]",
            "│  ╰─ [0]: Item",
            '│  │  ╰─ sku: "a"',
        ]

    def test_empty_nested_sequence_has_no_body(self) -> None:
        assert render_object(Holder([])).splitlines()[1:] == ["╰─ values: List[0]"]

    def test_nested_sequence_truncation(self) -> None:
        lines = render_object(Holder(list(range(12)))).splitlines()
        assert lines[1] == "╰─ values: List[12]"
        assert lines[-2] == "│  └─ [9]: 9"
        assert lines[-1] == "│  └─ ... and 2 more items"


class TestDepthLimit:
    def test_collapses_beyond_max_depth(self) -> None:
        lines = render_object(chain(5)).splitlines()

        assert lines == [
            f"╭─ Link ({MODULE})",
            '├─ name: "l0"',
            "╰─ next: Link",
            '│  ├─ name: "l1"',
            "│  ╰─ next: Link",
            '│  │  ├─ name: "l2"',
            "│  │  ╰─ next: Link",
            '│  │  │  ├─ name: "l3"',
            "│  │  │  ╰─ next: Link {...}",
        ]

    def test_no_node_deeper_than_max_depth(self) -> None:
        root = ObjectRenderer(FormatOptions(max_depth=1)).build_tree(chain(4))

        def deepest(node, depth=0):
            return max([depth] + [deepest(child, child.depth) for child in node.children])

        assert deepest(root) <= 1

    def test_max_depth_zero_keeps_only_top_fields(self) -> None:
        lines = ObjectRenderer(FormatOptions(max_depth=0)).render(chain(3)).splitlines()
        assert lines[-1] == "╰─ next: Link {...}"


class TestHeaderStyle:
    def test_six_fields_at_root_are_boxed(self) -> None:
        lines = render_object(Profile()).splitlines()
        assert lines[0] == f"═══ Profile ({MODULE}) ═══"
        assert lines[-2] == "└─ f: 6"
        assert lines[-1] == FOOTER

    def test_nested_style_uses_own_field_count(self) -> None:
        root = ObjectRenderer().build_tree(Wrapper(1, Profile()))
        profile = root.children[1]

        assert root.style is HeaderStyle.BRANCH
        assert profile.style is HeaderStyle.BOXED
        lines = render_object(Wrapper(1, Profile())).splitlines()
        assert lines[0] == f"╭─ Wrapper ({MODULE})"
        assert lines[-1] == "│  └─ f: 6"
        assert FOOTER not in lines

    def test_truncated_fields(self) -> None:
        data = {f"k{index:02d}": index for index in range(12)}
        lines = render_object(data).splitlines()
        assert lines[0] == "═══ dict ═══"
        assert lines[-3] == "└─ k09: 9"
        assert lines[-2] == "└─ ... and 2 more fields"
        assert lines[-1] == FOOTER


class TestFailureIsolation:
    def test_inaccessible_field_does_not_abort_siblings(self) -> None:
        assert render_object(Sensor()).splitlines() == [
            f"╭─ Sensor ({MODULE})",
            "├─ id: 1",
            "╰─ reading: <inaccessible>",
        ]

    def test_unset_slot_is_inaccessible(self) -> None:
        assert render_object(Money.__new__(Money)).splitlines()[-1] == "╰─ cents: <inaccessible>"

    def test_introspection_failure_falls_back_to_str(self) -> None:
        assert render_object(Broken()) == "Broken!"

    def test_nested_introspection_failure_falls_back_inline(self) -> None:
        assert render_object({"thing": Broken()}).splitlines()[-1] == "╰─ thing: Broken!"

    def test_non_string_attribute_names_keep_the_tree(self) -> None:
        loose = Empty()
        loose.a = 1
        loose.__dict__[5] = 2

        assert render_object(loose).splitlines() == [f"╭─ Empty ({MODULE})", "├─ 5: 2", "╰─ a: 1"]

    def test_no_accessible_fields_marker(self) -> None:
        assert render_object(Empty()).splitlines() == [f"╭─ Empty ({MODULE})", "╰─ No accessible fields"]


class TestCycles:
    def test_self_reference_is_not_expanded(self) -> None:
        node = Node("a")
        node.parent = node
        assert render_object(node).splitlines()[-1] == "╰─ parent: Node {...} (cycle)"

    def test_shared_substructure_renders_each_time(self) -> None:
        shared = Address("Oslo", "Main")
        text = render_object({"home": shared, "work": shared})
        assert text.count('city: "Oslo"') == 2

    def test_list_containing_itself(self) -> None:
        items: list = [1]
        items.append(items)
        lines = render_object({"items": items}).splitlines()
        assert lines[-1] == "│  ╰─ [1]: List[2] (cycle)"
