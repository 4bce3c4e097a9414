"""Tests for package resolution and dependency wiring."""

from __future__ import annotations

import pytest

from pkgdesc.errors import UnresolvableDependency
from pkgdesc.model import Package, Project, ProjectKind
from pkgdesc.resolver import DeclaredPackage, ProviderRegistry, resolve_package


class StaticProvider:
    """Provider returning a single-library package with no dependencies."""

    def __init__(self, name: str) -> None:
        self._name = name
        self.calls = 0

    @property
    def name(self) -> str:
        return self._name

    def resolve(self) -> Package:
        self.calls += 1
        package = Package(self._name)
        package.set_main_library(Project(self._name, self._name, ProjectKind.LIBRARY))
        return package


class FailingProvider:
    """Provider whose resolution always raises."""

    name = "broken"

    def resolve(self) -> Package:
        raise RuntimeError("manifest missing")


def _registry(*names: str) -> ProviderRegistry:
    registry = ProviderRegistry()
    for name in names:
        registry.register(StaticProvider(name))
    return registry


def test_single_dependency_scenario() -> None:
    """libA depending on base links base into both library and test."""
    package = resolve_package("libA", ["base"], registry=_registry("base"))

    assert package.name == "libA"
    assert package.main_library.name == "libA"
    assert package.main_library.dependency_names == ["base"]
    assert package.test_project.name == "libA_test"
    assert package.test_project.dependency_names == ["base", "libA"]
    assert [sub.name for sub in package.sub_packages] == ["base"]


def test_no_dependencies_scenario() -> None:
    package = resolve_package("libB", [], registry=_registry())

    assert package.main_library.dependency_names == []
    assert package.test_project.dependency_names == ["libB"]
    assert package.sub_packages == []


def test_dependency_order_follows_declaration() -> None:
    registry = _registry("z", "a", "m")
    package = resolve_package("app", ["z", "a", "m"], registry=registry)

    assert package.main_library.dependency_names == ["z", "a", "m"]
    assert package.test_project.dependency_names == ["z", "a", "m", "app"]
    assert [sub.name for sub in package.sub_packages] == ["z", "a", "m"]
    # Library edges point at the sub-packages' own library objects.
    for dep, sub in zip(package.main_library.dependencies, package.sub_packages):
        assert dep is sub.main_library


def test_test_project_ends_with_own_library() -> None:
    package = resolve_package("app", ["a", "b"], registry=_registry("a", "b"))
    assert package.test_project.dependencies[-1] is package.main_library


def test_resolution_is_deterministic() -> None:
    registry = _registry("a", "b")
    first = resolve_package("app", ["a", "b"], registry=registry)
    second = resolve_package("app", ["a", "b"], registry=registry)

    assert first == second
    assert first is not second


def test_no_project_depends_on_itself() -> None:
    package = resolve_package("app", ["a"], registry=_registry("a"))
    for pkg in package.walk():
        for project in pkg.projects():
            assert project.name not in project.dependency_names


def test_identifier_defaults_to_root_name() -> None:
    package = resolve_package("app", registry=_registry())
    assert package.main_library.identifier == "app"
    assert package.test_project.identifier == "app"


def test_identifier_is_normalized() -> None:
    package = resolve_package(
        "chshg", registry=_registry(), identifier="github.com\\jurgen-kluft\\chshg"
    )
    assert package.main_library.identifier == "github.com/jurgen-kluft/chshg"


def test_test_only_dependencies_are_linked_first() -> None:
    registry = _registry("cunittest", "cbase")
    package = resolve_package(
        "chshg", ["cbase"], registry=registry, test_dependency_names=["cunittest"]
    )

    assert package.main_library.dependency_names == ["cbase"]
    assert package.test_project.dependency_names == ["cunittest", "cbase", "chshg"]
    assert [sub.name for sub in package.sub_packages] == ["cunittest", "cbase"]


def test_repeated_dependency_is_resolved_once() -> None:
    provider = StaticProvider("a")
    registry = ProviderRegistry()
    registry.register(provider)

    package = resolve_package("app", ["a", "a"], registry=registry)

    assert provider.calls == 1
    assert package.main_library.dependency_names == ["a"]


def test_empty_root_name_is_rejected() -> None:
    with pytest.raises(ValueError):
        resolve_package("", registry=_registry())


def test_missing_provider_raises() -> None:
    with pytest.raises(UnresolvableDependency) as exc_info:
        resolve_package("app", ["a", "ghost"], registry=_registry("a"))
    assert exc_info.value.name == "ghost"


def test_failing_provider_is_wrapped() -> None:
    registry = ProviderRegistry()
    registry.register(FailingProvider())

    with pytest.raises(UnresolvableDependency) as exc_info:
        resolve_package("app", ["broken"], registry=registry)

    assert exc_info.value.name == "broken"
    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_nested_missing_dependency_propagates() -> None:
    """A provider reporting a missing nested dependency fails the root."""
    registry = ProviderRegistry()
    registry.register(DeclaredPackage("mid", ["ghost"], registry=registry))

    with pytest.raises(UnresolvableDependency) as exc_info:
        resolve_package("app", ["mid"], registry=registry)
    assert exc_info.value.name == "ghost"


def test_self_dependency_is_rejected() -> None:
    with pytest.raises(UnresolvableDependency):
        resolve_package("app", ["app"], registry=_registry("app"))


def test_provider_cycle_is_detected() -> None:
    registry = ProviderRegistry()
    registry.register(DeclaredPackage("a", ["b"], registry=registry))
    registry.register(DeclaredPackage("b", ["a"], registry=registry))

    with pytest.raises(UnresolvableDependency) as exc_info:
        registry.resolve("a")
    assert "cycle" in exc_info.value.reason


def test_provider_returning_wrong_package_is_rejected() -> None:
    class Impostor:
        name = "real"

        def resolve(self) -> Package:
            return Package("other")

    registry = ProviderRegistry()
    registry.register(Impostor())

    with pytest.raises(UnresolvableDependency):
        registry.resolve("real")


def test_declared_package_resolves_transitively() -> None:
    registry = ProviderRegistry()
    registry.register(DeclaredPackage("base", registry=registry))
    registry.register(DeclaredPackage("core", ["base"], registry=registry))

    package = resolve_package("app", ["core"], registry=registry)

    core = package.sub_packages[0]
    assert core.main_library.dependency_names == ["base"]
    assert core.sub_packages[0].name == "base"
    assert core.test_project.dependency_names == ["base", "core"]


@pytest.mark.parametrize(
    "kwargs",
    [{"dependency_names": "base"}, {"test_dependency_names": "cunittest"}],
)
def test_bare_string_dependency_list_is_rejected(kwargs) -> None:
    with pytest.raises(TypeError):
        resolve_package("app", registry=_registry("base", "cunittest"), **kwargs)


def test_declared_package_rejects_bare_string() -> None:
    with pytest.raises(TypeError):
        DeclaredPackage("app", "base")
