from fastapi.testclient import TestClient

from api import create_app


client = TestClient(create_app())

BUILTIN = {"formatter": "builtin"}


def test_preview(example_source, expected_getters):
	resp = client.post("/preview", json={"source": example_source, "config": BUILTIN})
	assert resp.status_code == 200
	body = resp.json()
	assert body["output_name"] == "main_getters.go"
	assert body["content"] == expected_getters
	assert body["accessor_count"] == 7


def test_preview_unsupported_field():
	source = "package b\n\n//go:generate getters\ntype B struct {\n\tcb func()\n}\n"
	resp = client.post("/preview", json={"source": source, "config": BUILTIN})
	assert resp.status_code == 422
	assert "B.cb" in resp.json()["detail"]


def test_generate(go_tree, example_source):
	root = go_tree({"main.go": example_source})
	resp = client.post("/generate", json={"root_path": str(root), "config": BUILTIN})
	assert resp.status_code == 200
	generated = resp.json()["generated"]
	assert len(generated) == 1
	assert generated[0]["accessor_count"] == 7
	assert (root / "main_getters.go").exists()


def test_generate_invalid_root(tmp_path):
	resp = client.post("/generate", json={"root_path": str(tmp_path / "nope")})
	assert resp.status_code == 400
