"""Exportação da DRE em texto."""
from painel_dre.services.dre_service import compute_dre
from painel_dre.services.export_service import (
    export_filename,
    render_dre_text,
    write_dre_report,
)


def test_render_reference_report(sales_rows, expense_rows):
    text = render_dre_text(compute_dre(sales_rows, expense_rows), "Cantina Roma", "Este mês")

    assert text.startswith("DEMONSTRAÇÃO DO RESULTADO DO EXERCÍCIO\nCantina Roma\nPeríodo: Este mês\n")
    assert "Receita Total: R$ 1.500,00" in text
    assert "(-) CMV: R$ 300,00" in text
    assert "(=) Total Custos Variáveis: R$ 300,00" in text
    assert "(=) Lucro Bruto: R$ 1.200,00 (80.0%)" in text
    assert "(-) CMO: R$ 200,00" in text
    assert "(-) Ocupação: R$ 0,00" in text
    assert "(=) Lucro Líquido: R$ 1.000,00 (66.7%)" in text
    assert "Ticket Médio: R$ 20,00" in text
    assert text.rstrip().endswith("Total de Pedidos: 75")


def test_section_order(sales_rows, expense_rows):
    text = render_dre_text(compute_dre(sales_rows, expense_rows), "X", "Y")
    sections = ["RECEITAS", "CUSTOS E DESPESAS VARIÁVEIS", "DESPESAS FIXAS", "RESULTADO", "MÉTRICAS"]
    positions = [text.index(f"\n{s}\n") for s in sections]
    assert positions == sorted(positions)


def test_export_filename_strips_path_separators():
    assert export_filename("Cantina", "Este mês") == "DRE_Cantina_Este mês.txt"
    assert export_filename("Bar", "01/03/2025 a 31/03/2025") == "DRE_Bar_01-03-2025 a 31-03-2025.txt"


def test_write_report(tmp_path, sales_rows, expense_rows):
    dre = compute_dre(sales_rows, expense_rows)
    path = write_dre_report(tmp_path / "exports", dre, "Cantina", "Este mês")
    assert path.exists()
    assert path.read_text(encoding="utf-8") == render_dre_text(dre, "Cantina", "Este mês")
