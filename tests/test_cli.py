from sclexer.cli import main


def test_main_prints_tokens(tmp_path, capsys):
    source = tmp_path / "prog.sc"
    source.write_text("Imw x = 5;\nTurnback x\n", encoding="utf-8")
    assert main([str(source)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Line : 1 Token Text: Imw Token Type: Integer"
    assert "Line : 1 Error in Token Text: ; Token Type: Invalid Identifier" in lines
    assert lines[-1] == "Line : 2 Token Text: x Token Type: Identifier"
    assert len(lines) == 7


def test_main_reads_default_file(tmp_path, monkeypatch, capsys):
    (tmp_path / "test.sc").write_text("Loli\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    assert capsys.readouterr().out == "Line : 1 Token Text: Loli Token Type: Struct\n"


def test_main_missing_file(tmp_path, capsys):
    status = main([str(tmp_path / "absent.sc")])
    captured = capsys.readouterr()
    assert status == 1
    assert captured.err.startswith("Error opening file")
    assert captured.out == ""