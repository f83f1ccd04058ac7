import json

import pytest

import ceilings.__main__ as cli

EXAMPLE1_CM = [(0, 0), (0, 125), (27, 125), (27.01, 171), (222.01, 169.98), (225, 0)]


def _write_survey(path, **overrides):
    payload = {
        'measures': {'length': 'cm', 'perimeter': 'm', 'area': 'm2', 'angle': 'deg'},
        'points': [{'x': x, 'y': y} for x, y in EXAMPLE1_CM],
        'description': [['Room', 'Hall']],
    }
    payload.update(overrides)
    path.write_text(json.dumps(payload), encoding='utf-8')
    return path


def test_main_prints_metrics(tmp_path, capsys):
    survey = _write_survey(tmp_path / 'room.json')

    cli.main([str(survey)])

    out = capsys.readouterr().out
    assert 'Points: 6' in out
    assert 'Area: 3.69 m2' in out
    assert 'Perimeter: 7.88 m' in out
    assert 'Width: 225.0 cm' in out
    assert '  [1] (0.0, 125.0)' in out


def test_main_writes_layout(tmp_path, capsys):
    survey = _write_survey(tmp_path / 'room.json')
    layout_path = tmp_path / 'out' / 'layout.json'

    cli.main([str(survey), '--layout-output-path', str(layout_path), '--draw-description'])

    data = json.loads(layout_path.read_text(encoding='utf-8'))
    assert [v['label'] for v in data['vertices']] == ['A', 'B', 'C', 'D', 'E', 'F']
    assert data['edges'][-1]['label'] == 'FA'
    assert data['notes'][0] == 'Room: Hall'
    assert data['canvas_width'] > 1600
    assert 'Layout written to' in capsys.readouterr().out


def test_main_prints_coordinates_in_requested_unit(tmp_path, capsys):
    survey = _write_survey(tmp_path / 'room.json')

    cli.main([str(survey), '--unit', 'm', '--precision', '3'])

    assert '  [2] (0.27, 1.25)' in capsys.readouterr().out


def test_main_rejects_unknown_unit(tmp_path):
    survey = _write_survey(tmp_path / 'room.json', measures={'length': 'cubit'})

    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(survey)])

    assert excinfo.value.code == 2


def test_load_drawing_uses_payload_units():
    drawing = cli.load_drawing(
        {
            'measures': {'length': 'm'},
            'points': [{'x': 0, 'y': 0}, {'distance': 2, 'direction': 90}, {'distance': 1, 'angle': 90}],
        }
    )

    assert [p.as_tuple() for p in drawing.points()] == [(0, 0), (0, 2), (1, 2)]
    assert len(drawing.description) == 0


@pytest.mark.parametrize(
    'overrides',
    [
        {'description': [['only-key']]},
        {'description': ['Room']},
        {'description': {'Room': 'Hall'}},
        {'measures': ['cm']},
        {'points': {'x': 0, 'y': 0}},
    ],
)
def test_main_rejects_malformed_survey(tmp_path, overrides):
    survey = _write_survey(tmp_path / 'room.json', **overrides)

    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(survey)])

    assert excinfo.value.code == 2


def test_main_rejects_non_object_survey(tmp_path):
    survey = tmp_path / 'room.json'
    survey.write_text(json.dumps([1, 2, 3]), encoding='utf-8')

    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(survey)])

    assert excinfo.value.code == 2
