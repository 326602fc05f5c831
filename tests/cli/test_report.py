import json
import pytest

from typstyle.cli.report import main, render_styles, NO_VALUE
from typstyle.core.parser.style_models import StyleRecord


class TestRenderStyles:
    def test_empty_result(self):
        assert render_styles([]) == "No se encontraron estilos en el documento."

    def test_block_per_style(self):
        output = render_styles([
            StyleRecord(name="Normal", kind="paragraph", font_family="Calibri",
                        font_size_half_points="22", properties={"qFormat": ""}),
            StyleRecord(name="Vacío"),
        ])
        assert "Se encontraron 2 estilos:" in output
        assert "Estilo: Normal (Tipo: paragraph)" in output
        assert "Calibri" in output
        assert NO_VALUE in output
        assert "Estilo: Vacío (Tipo: -)" in output


class TestMain:
    def test_prints_report(self, sample_docx_path, capsys):
        assert main([str(sample_docx_path)]) == 0
        out = capsys.readouterr().out
        assert "Estilo: Heading 1 (Tipo: paragraph)" in out
        assert "Default Paragraph Font" not in out

    def test_all_flag(self, sample_docx_path, capsys):
        assert main([str(sample_docx_path), "--all"]) == 0
        assert "Default Paragraph Font" in capsys.readouterr().out

    def test_json_output(self, sample_docx_path, capsys):
        assert main([str(sample_docx_path), "--json", "--attributes"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert [d["name"] for d in data] == ["Normal", "Heading 1"]
        assert data[0]["properties"]["spacing:line"] == "259"

    def test_log_level_is_case_insensitive(self, sample_docx_path):
        assert main([str(sample_docx_path), "--log-level", "debug"]) == 0

    def test_invalid_log_level_is_usage_error(self, sample_docx_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(sample_docx_path), "--log-level", "foo"])
        assert exc_info.value.code == 2
        assert "--log-level" in capsys.readouterr().err

    def test_error_exit_code(self, tmp_path, capsys):
        assert main([str(tmp_path / "nonexistent.docx")]) == 1
        assert capsys.readouterr().out == ""
