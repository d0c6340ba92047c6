from demo import ListDemo, main, stringify


def test_run_prints_one_to_ten(capsys):
    demo = ListDemo()
    items = demo.run()
    assert capsys.readouterr().out == '\n'.join(str(i) for i in range(1, 11)) + '\n'
    assert demo.get_output() == [str(i) for i in range(1, 11)]
    assert len(items) == 10


def test_run_without_console_output(capsys):
    demo = ListDemo(console_output=False)
    demo.run(3)
    assert capsys.readouterr().out == ''
    assert demo.get_output() == ['1', '2', '3']


def test_trace_goes_to_stderr(capsys):
    ListDemo(trace_output=True).run(2)
    captured = capsys.readouterr()
    assert captured.out == '1\n2\n'
    assert '[trace] push 2' in captured.err
    assert '[trace] push 1' in captured.err


def test_stringify():
    assert stringify(None) == 'nil'
    assert stringify(True) == 'true'
    assert stringify(False) == 'false'
    assert stringify(3.0) == '3'
    assert stringify(2.5) == '2.5'
    assert stringify('hi') == 'hi'


def test_main(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.split() == [str(i) for i in range(1, 11)]

    assert main(['4']) == 0
    assert capsys.readouterr().out.split() == ['1', '2', '3', '4']

    assert main(['help']) == 0
    assert 'Usage' in capsys.readouterr().out


def test_main_bad_arguments(capsys):
    assert main(['ten']) == 2
    assert capsys.readouterr().err.startswith('[error]: ')

    assert main(['-1']) == 2
    assert capsys.readouterr().err == '[error]: count must not be negative, got -1\n'

    assert main(['1', '2']) == 2
    assert 'unexpected arguments' in capsys.readouterr().err


def test_main_trace_flag(capsys):
    assert main(['--trace', '2']) == 0
    captured = capsys.readouterr()
    assert captured.out == '1\n2\n'
    assert '[trace] push 1' in captured.err

    assert main(['2']) == 0
    assert capsys.readouterr().err == ''


def test_get_output_is_a_copy():
    demo = ListDemo(console_output=False)
    demo.run(2)
    demo.get_output().append('3')
    assert demo.get_output() == ['1', '2']
