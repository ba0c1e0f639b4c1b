from tokenshell.sortargs import main, sort_args


def test_sort_args():
    assert sort_args(["c", "a", "b"]) == ["a", "b", "c"]


def test_sort_args_keeps_duplicates():
    args = ["b", "a", "b"]
    assert sort_args(args) == sorted(args)


def test_sort_args_empty():
    assert sort_args([]) == []


def test_main_output(capsys):
    status = main(["prog", "b", "a"])
    captured = capsys.readouterr()
    assert status == 0
    assert captured.out == "the program name is <prog>\na\nb\n"


def test_main_no_arguments(capsys):
    main(["prog"])
    assert capsys.readouterr().out == "the program name is <prog>\n"