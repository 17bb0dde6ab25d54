import cli


BAD = "package b\n\n//go:generate getters\ntype B struct {\n\tcb func()\n}\n"


def test_generate_prints_confirmation(go_tree, example_source, expected_getters, capsys):
	root = go_tree({"main.go": example_source})
	assert cli.main(["generate", str(root), "--formatter", "builtin"]) == 0
	out = capsys.readouterr().out
	assert out == f"generated getters for {root / 'main.go'}\n"
	assert (root / "main_getters.go").read_text(encoding="utf-8") == expected_getters


def test_no_subcommand_uses_working_directory(go_tree, example_source, monkeypatch):
	root = go_tree({"main.go": example_source})
	monkeypatch.chdir(root)
	assert cli.main(["--formatter", "builtin"]) == 0
	assert (root / "main_getters.go").exists()


def test_failure_exits_nonzero_with_diagnostic(go_tree, capsys):
	root = go_tree({"b.go": BAD})
	assert cli.main(["generate", str(root), "--formatter", "builtin"]) == 1
	err = capsys.readouterr().err
	assert "unsupported field type for B.cb" in err
	assert not (root / "b_getters.go").exists()


def test_keep_going_still_fails(go_tree, example_source, capsys):
	root = go_tree({"a.go": BAD, "b.go": example_source})
	assert cli.main(["generate", str(root), "--formatter", "builtin", "--keep-going"]) == 1
	captured = capsys.readouterr()
	assert "generated getters for" in captured.out
	assert "1 file(s) failed" in captured.err


def test_check_reports_stale(go_tree, example_source, capsys):
	root = go_tree({"main.go": example_source})
	assert cli.main(["generate", str(root), "--formatter", "builtin", "--check"]) == 1
	assert "stale getters for" in capsys.readouterr().out
	assert not (root / "main_getters.go").exists()
	cli.main(["generate", str(root), "--formatter", "builtin"])
	assert cli.main(["generate", str(root), "--formatter", "builtin", "--check"]) == 0


def test_config_from_args():
	args = cli.build_parser().parse_args(
		["generate", "--keep-going", "--title-case", "unicode", "--legacy-chan", "--directive", "//x"]
	)
	config = cli.config_from_args(args)
	assert not config.fail_fast
	assert config.export_strategy == "unicode"
	assert config.legacy_chan_spelling
	assert config.directive == "//x"
	assert args.path == "."
