"""
Exemplo de uso do motor de DRE.

Passo a passo:
1. Exporte as tabelas de vendas e despesas para dados/vendas.csv e
   dados/despesas.csv (ou defina PAINEL_DRE_DATA_DIR no .env)
2. Execute: python exemplo.py [mes_atual|mes_anterior|ano_atual|...]
3. O relatório é impresso e gravado em exports/
"""

import logging
import sys
from datetime import date

from painel_dre.config import PROJECT_ROOT, RESTAURANT_NAME
from painel_dre.data.loaders import load_expenses, load_sales
from painel_dre.exceptions import DataLoadError
from painel_dre.services.breakeven_service import breakeven_from_records, compute_historical_ticket
from painel_dre.services.dre_service import compute_dre
from painel_dre.services.export_service import render_dre_text, write_dre_report
from painel_dre.services.normalizer import normalize_expenses, normalize_sales
from painel_dre.services.period_service import filter_by_period, resolve_period
from painel_dre.utils.formatting import format_brl, format_int, format_percent
from painel_dre.utils.logger import setup_logging

logger = logging.getLogger("painel_dre.exemplo")


def main():
    setup_logging()
    filter_type = sys.argv[1] if len(sys.argv) > 1 else "ano_atual"

    # 1. Dados
    try:
        all_sales = normalize_sales(load_sales())
        all_expenses = normalize_expenses(load_expenses())
    except DataLoadError as e:
        logger.error("%s", e)
        sys.exit(1)

    # 2. Período
    period = resolve_period(filter_type, today=date.today())
    sales = filter_by_period(all_sales, period)
    expenses = filter_by_period(all_expenses, period)
    print(f"Período: {period.label} ({period.start} a {period.end})")
    print(f"{len(sales)} vendas, {len(expenses)} despesas\n")

    # 3. DRE
    hist_ticket = compute_historical_ticket(all_sales)
    dre = compute_dre(sales, expenses, historical_ticket=hist_ticket)
    print(render_dre_text(dre, RESTAURANT_NAME, period.label))

    # 4. Ponto de equilíbrio
    be = breakeven_from_records(sales, expenses, historical_ticket=hist_ticket)
    print("PONTO DE EQUILÍBRIO")
    if be.atingivel:
        print(f"Receita: {format_brl(be.receita)}")
        print(f"Pedidos: {format_int(be.pedidos)} (ticket {format_brl(be.ticket_medio)})")
    else:
        print("Inatingível: custos variáveis >= receita")
    print(f"% Custos Variáveis: {format_percent(be.razao_variavel * 100)}\n")

    # 5. Exportação
    path = write_dre_report(PROJECT_ROOT / "exports", dre, RESTAURANT_NAME, period.label)
    print(f"Relatório gravado em {path}")


if __name__ == "__main__":
    main()
