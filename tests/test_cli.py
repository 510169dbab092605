from click.testing import CliRunner
import pytest

from wktree.cli import main


@pytest.fixture
def runner():
    return CliRunner()


def test_validate_reports_ok(runner, prj_4326):
    res = runner.invoke(main, ['validate', prj_4326])
    assert res.exit_code == 0
    assert res.output == 'OK\n'


def test_validate_reports_error(runner):
    res = runner.invoke(main, ['validate', '-'], input='GEOGCS["test"')
    assert res.exit_code == 1
    assert "Expected ']' to close section" in res.output


def test_format_prints_compact(runner, prj_pulkovo):
    res = runner.invoke(main, ['format', prj_pulkovo])
    assert res.exit_code == 0
    assert res.output == (
        'GEOGCS["GCS_Pulkovo_1942",DATUM["D_Pulkovo_1942",'
        'SPHEROID["Krasovsky_1940",6378245,298.3]],PRIMEM["Greenwich",0],'
        'UNIT["Degree",0.0174532925199433,666.0010098,1]]\n')


def test_format_prints_pretty(runner):
    res = runner.invoke(main, ['format', '--pretty', '--indent', '4', '-'],
                        input='A["a",B[1]]')
    assert res.exit_code == 0
    assert res.output == 'A["a",\n    B[1]\n]\n'


def test_format_reads_indent_from_environment(runner):
    res = runner.invoke(main, ['format', '--pretty', '-'],
                        input='A["a",B[1]]', env={'WKTREE_INDENT': '1'})
    assert res.output == 'A["a",\n B[1]\n]\n'


def test_info_summarizes_definition(runner, prj_4326):
    res = runner.invoke(main, ['info', prj_4326])
    assert res.exit_code == 0
    assert res.output.splitlines() == [
        'root: GEOGCS',
        'datum: D_WGS_1984',
        'spheroid: WGS_1984',
        'semi_major_axis: 6378137',
        'inverse_flattening: 298.257223563',
        'epsg: 4326',
    ]


def test_info_includes_projection(runner, prj_2249):
    res = runner.invoke(main, ['info', prj_2249])
    assert 'projection: Lambert_Conformal_Conic' in res.output.splitlines()


def test_get_prints_section(runner, prj_4326):
    res = runner.invoke(main, ['get', prj_4326, 'DATUM/SPHEROID'])
    assert res.exit_code == 0
    assert res.output == 'SPHEROID["WGS_1984",6378137,298.257223563]\n'


def test_get_missing_section(runner, prj_4326):
    res = runner.invoke(main, ['get', prj_4326, 'PROJECTION'])
    assert res.exit_code == 1
    assert 'No section found at PROJECTION' in res.output


def test_set_modifies_section(runner, prj_4326):
    res = runner.invoke(main, ['set', prj_4326, 'SPHEROID',
                               '--value', 'ITRF_2008',
                               '--number', '0', '6378140'])
    assert res.exit_code == 0
    assert 'SPHEROID["ITRF_2008",6378140,298.257223563]' in res.output


def test_set_replaces_numbers(runner, prj_4326):
    res = runner.invoke(main, ['set', prj_4326, 'SPHEROID',
                               '--numbers', '1,2.5'])
    assert res.exit_code == 0
    assert 'SPHEROID["WGS_1984",1,2.5]' in res.output


def test_set_rejects_wrong_number_count(runner, prj_4326):
    res = runner.invoke(main, ['set', prj_4326, 'SPHEROID',
                               '--numbers', '1,2,3'])
    assert res.exit_code == 1
    assert 'Could not replace numbers of SPHEROID with 3 values' in res.output


def test_set_rejects_bad_index(runner, prj_4326):
    res = runner.invoke(main, ['set', prj_4326, 'SPHEROID',
                               '--number', '10', '1'])
    assert res.exit_code == 1
    assert 'Could not set number 10 of SPHEROID' in res.output


def test_set_rejects_missing_section(runner, prj_4326):
    res = runner.invoke(main, ['set', prj_4326, 'NOPE', '--value', 'x'])
    assert res.exit_code == 1
    assert 'No section found at NOPE' in res.output


def test_set_rejects_non_numeric_list(runner, prj_4326):
    res = runner.invoke(main, ['set', prj_4326, 'SPHEROID',
                               '--numbers', '1,x'])
    assert res.exit_code == 2


def test_compare_equivalent(runner, prj_4326, tmp_path):
    other = tmp_path / 'other.prj'
    other.write_text('GEOGCS["GCS_WGS_1984",\n'
                     '  DATUM["D_WGS_1984",'
                     'SPHEROID["WGS_1984",6378137,298.257223563]],\n'
                     '  PRIMEM["Greenwich",0],\n'
                     '  UNIT["Degree",0.0174532925199433]]')
    res = runner.invoke(main, ['compare', prj_4326, str(other)])
    assert res.exit_code == 0
    assert res.output == 'equivalent\n'


def test_compare_different(runner, prj_4326, prj_pulkovo):
    res = runner.invoke(main, ['compare', prj_4326, prj_pulkovo])
    assert res.exit_code == 1
    assert res.output == 'different\n'


def test_compare_uses_tolerance(runner, tmp_path):
    a = tmp_path / 'a.prj'
    b = tmp_path / 'b.prj'
    a.write_text('SPHEROID["s",6378137.0,298.257]')
    b.write_text('SPHEROID["s",6378137.01,298.257]')
    res = runner.invoke(main, ['compare', str(a), str(b)])
    assert res.exit_code == 1
    res = runner.invoke(main, ['compare', '--tolerance', '0.1', str(a),
                               str(b)])
    assert res.exit_code == 0


def test_epsg_prints_code(runner, prj_pulkovo):
    res = runner.invoke(main, ['epsg', prj_pulkovo])
    assert res.exit_code == 0
    assert res.output == '4284\n'


def test_epsg_unknown(runner):
    res = runner.invoke(main, ['epsg', '-'], input='GEOGCS["x"]')
    assert res.exit_code == 1
    assert 'Could not guess EPSG code' in res.output


def test_verbose_flag(runner, prj_4326):
    res = runner.invoke(main, ['--verbose', 'validate', prj_4326])
    assert res.exit_code == 0
