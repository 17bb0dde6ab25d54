from gogetters.goast import ImportSpec
from gogetters.imports import ImportUsage, qualifiers
from gogetters.model import ImportRef


def test_qualifiers_found_anywhere_in_type():
	assert qualifiers("uuid.UUID") == ["uuid"]
	assert qualifiers("map[uuid.UUID][]*time.Time") == ["uuid", "time"]
	assert qualifiers("...pkg.T") == ["pkg"]
	assert qualifiers("interface{}") == []
	assert qualifiers("[]User") == []


def test_import_alias():
	assert ImportRef(path="github.com/google/uuid").alias == "uuid"
	assert ImportRef(path="time").alias == "time"
	assert ImportRef(path="github.com/google/uuid", name="gid").alias == "gid"


def test_only_referenced_imports_are_used():
	usage = ImportUsage([ImportSpec("fmt"), ImportSpec("github.com/google/uuid"), ImportSpec("time")])
	for text in ("uuid.UUID", "string", "int", "[]User"):
		usage.mark(text)
	assert usage.used() == [ImportRef(path="github.com/google/uuid")]


def test_nested_qualifier_marks_import():
	usage = ImportUsage([ImportSpec("time")])
	usage.mark("*time.Time")
	assert usage.used() == [ImportRef(path="time")]


def test_explicit_import_name():
	usage = ImportUsage([ImportSpec("github.com/google/uuid", name="gid")])
	usage.mark("uuid.UUID")
	assert usage.used() == []
	usage.mark("gid.UUID")
	assert usage.used() == [ImportRef(path="github.com/google/uuid", name="gid")]


def test_blank_and_dot_imports_never_used():
	usage = ImportUsage([ImportSpec("embed", name="_"), ImportSpec("strings", name=".")])
	usage.mark("_.X")
	assert usage.used() == []


def test_alias_collision_last_wins():
	usage = ImportUsage([ImportSpec("math/rand"), ImportSpec("crypto/rand")])
	usage.mark("rand.Reader")
	assert usage.used() == [ImportRef(path="crypto/rand")]


def test_used_imports_sorted_by_path():
	usage = ImportUsage([ImportSpec("time"), ImportSpec("github.com/google/uuid"), ImportSpec("net/url")])
	for text in ("time.Duration", "*url.URL", "uuid.UUID"):
		usage.mark(text)
	assert [r.path for r in usage.used()] == ["github.com/google/uuid", "net/url", "time"]
