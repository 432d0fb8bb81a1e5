"""Software package descriptions and a builder for them."""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional


class Language(enum.Enum):
    RUST = "Rust"
    JAVA = "Java"
    PERL = "Perl"


@dataclass(frozen=True)
class Dependency:
    name: str
    version_expression: str


@dataclass
class Package:
    """A representation of a software package."""

    name: str
    version: str = "0.1"
    authors: list[str] = field(default_factory=list)
    dependencies: list[Dependency] = field(default_factory=list)
    language: Optional[Language] = None

    def as_dependency(self) -> Dependency:
        """Return this package as a dependency for building other packages."""
        return Dependency(name=self.name, version_expression=self.version)


class PackageBuilder:
    """Builds a :class:`Package`; call :meth:`build` to get the result."""

    def __init__(self, name: str) -> None:
        self._package = Package(name=str(name))

    def version(self, version: str) -> "PackageBuilder":
        """Set the package version."""
        self._package.version = str(version)
        return self

    def authors(self, authors: Iterable[str]) -> "PackageBuilder":
        """Set the package authors."""
        self._package.authors = list(authors)
        return self

    def dependency(self, dependency: Dependency) -> "PackageBuilder":
        """Add one more dependency."""
        self._package.dependencies.append(dependency)
        return self

    def language(self, language: Language) -> "PackageBuilder":
        """Set the language; it is None unless set."""
        self._package.language = language
        return self

    def build(self) -> Package:
        """Return the package built so far."""
        return dataclasses.replace(
            self._package,
            authors=list(self._package.authors),
            dependencies=list(self._package.dependencies),
        )


def main(argv: list[str] | None = None) -> int:
    """Build a few sample packages and print them."""
    base64 = PackageBuilder("base64").version("0.13").build()
    print(base64)
    log = PackageBuilder("log").version("0.4").language(Language.RUST).build()
    print(log)
    serde = (
        PackageBuilder("serde")
        .authors(["djmitche"])
        .version("4.0")
        .dependency(base64.as_dependency())
        .dependency(log.as_dependency())
        .build()
    )
    print(serde)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())