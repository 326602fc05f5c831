import io
import zipfile
import pytest

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"


def _wrap_styles(body: str) -> bytes:
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<w:styles xmlns:w="{W_NS}">{body}</w:styles>'
    ).encode("utf-8")


def _build_docx(entries: dict, compression=zipfile.ZIP_DEFLATED) -> io.BytesIO:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, 'w', compression=compression) as zf:
        zf.writestr('[Content_Types].xml', '<Types></Types>')
        for name, content in entries.items():
            zf.writestr(name, content)
    buffer.seek(0)
    return buffer


@pytest.fixture
def styles_xml():
    """Envuelve nodos <w:style> en un documento styles.xml completo."""
    return _wrap_styles


@pytest.fixture
def make_docx():
    """Crea un .docx en memoria con las partes indicadas."""
    return _build_docx


@pytest.fixture
def sample_styles_body():
    return (
        '<w:docDefaults><w:rPrDefault><w:rPr><w:sz w:val="22"/></w:rPr></w:rPrDefault></w:docDefaults>'
        '<w:latentStyles w:count="376"><w:lsdException w:name="Normal" w:qFormat="1"/></w:latentStyles>'
        '<w:style w:type="paragraph" w:default="1" w:styleId="Normal">'
        '  <w:name w:val="Normal"/>'
        '  <w:qFormat/>'
        '  <w:pPr><w:spacing w:after="160" w:line="259" w:lineRule="auto"/></w:pPr>'
        '  <w:rPr><w:rFonts w:ascii="Calibri" w:hAnsi="Calibri"/><w:sz w:val="22"/></w:rPr>'
        '</w:style>'
        '<w:style w:type="paragraph" w:styleId="Heading1">'
        '  <w:name w:val="Heading 1"/>'
        '  <w:basedOn w:val="Normal"/>'
        '  <w:next w:val="Normal"/>'
        '  <w:uiPriority w:val="9"/>'
        '  <w:qFormat/>'
        '  <w:pPr><w:keepNext/><w:outlineLvl w:val="0"/></w:pPr>'
        '  <w:rPr><w:rFonts w:hAnsi="Cambria" w:eastAsia="MS Mincho"/><w:b/><w:sz w:val="32"/></w:rPr>'
        '</w:style>'
        '<w:style w:type="character" w:default="1" w:styleId="DefaultParagraphFont">'
        '  <w:name w:val="Default Paragraph Font"/>'
        '  <w:uiPriority w:val="1"/>'
        '  <w:semiHidden/>'
        '  <w:unhideWhenUsed/>'
        '</w:style>'
        '<w:style w:type="table" w:styleId="TableGrid">'
        '  <w:name w:val="Table Grid"/>'
        '  <w:basedOn w:val="TableNormal"/>'
        '</w:style>'
    )


@pytest.fixture
def sample_docx(make_docx, styles_xml, sample_styles_body):
    return make_docx({'word/styles.xml': styles_xml(sample_styles_body)})


@pytest.fixture
def sample_docx_path(tmp_path, sample_docx):
    path = tmp_path / "sample.docx"
    path.write_bytes(sample_docx.getvalue())
    return path
