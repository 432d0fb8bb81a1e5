from exercisekit.package_builder import (
    Dependency,
    Language,
    Package,
    PackageBuilder,
    main,
)


def test_defaults():
    package = PackageBuilder("base64").build()
    assert package == Package(
        name="base64", version="0.1", authors=[], dependencies=[], language=None
    )


def test_version_and_language():
    package = PackageBuilder("log").version("0.4").language(Language.RUST).build()
    assert package.version == "0.4"
    assert package.language is Language.RUST
    assert package.name == "log"


def test_as_dependency_uses_name_and_version():
    package = PackageBuilder("base64").version("0.13").build()
    assert package.as_dependency() == Dependency(name="base64", version_expression="0.13")


def test_dependencies_keep_order():
    base64 = PackageBuilder("base64").version("0.13").build()
    log = PackageBuilder("log").version("0.4").build()
    serde = (
        PackageBuilder("serde")
        .authors(["djmitche"])
        .version("4.0")
        .dependency(base64.as_dependency())
        .dependency(log.as_dependency())
        .build()
    )
    assert serde.authors == ["djmitche"]
    assert [d.name for d in serde.dependencies] == ["base64", "log"]
    assert serde.dependencies[1].version_expression == "0.4"


def test_authors_replaces_previous():
    package = PackageBuilder("x").authors(["a"]).authors(["b", "c"]).build()
    assert package.authors == ["b", "c"]


def test_built_package_is_independent_of_builder():
    builder = PackageBuilder("pkg")
    first = builder.build()
    builder.dependency(Dependency("dep", "1.0"))
    assert first.dependencies == []
    assert len(builder.build().dependencies) == 1


def test_main_prints_packages(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "base64" in out
    assert "serde" in out
    assert "djmitche" in out