"""End-to-end tests for the lancamentos CLI."""

from datetime import date

from lancamentos.cli.main import cli
from lancamentos.domain.csv_export import CSV_HEADER
from lancamentos.domain.entities import Status


def _invoke(cli_runner, temp_store, *args, **kwargs):
    return cli_runner.invoke(
        cli, ["--database-url", f"sqlite:///{temp_store.database_path}", *args], **kwargs
    )


def _by_description(temp_store, descricao):
    return [r for r in temp_store.list_records() if r.descricao == descricao]


class TestAdd:
    def test_add_creates_transaction(self, cli_runner, temp_store):
        result = _invoke(
            cli_runner,
            temp_store,
            "add",
            "--data", "10/09/2025",
            "--descricao", "Mercado",
            "--categoria", "Custo Extra",
            "--tipo", "Saida",
            "--valor", "45,90",
        )

        assert result.exit_code == 0, result.output
        assert "Novo Lançamento: Lançamento criado com sucesso" in result.output
        assert "Vencimento: 10/09/2025" in result.output
        assert "R$ 45,90" in result.output

        (stored,) = _by_description(temp_store, "Mercado")
        assert stored.status is Status.ABERTO
        assert stored.observacao == ""

    def test_add_reports_missing_fields(self, cli_runner, temp_store):
        result = _invoke(cli_runner, temp_store, "add", "--valor=-3")

        assert result.exit_code == 1
        assert "Invalid form fields" in result.output
        assert "Descrição é obrigatória" in result.output
        assert "Categoria é obrigatória" in result.output
        assert "Valor não pode ser negativo" in result.output
        assert temp_store.list_records() == []


class TestListAndSummary:
    def test_list_all_dates_shows_totals(self, cli_runner, temp_store, sample_transactions):
        result = _invoke(cli_runner, temp_store, "list", "--all-dates")

        assert result.exit_code == 0, result.output
        assert "4 lançamento(s) encontrado(s)" in result.output
        assert "Total Receitas (Filtrado): R$ 2.500,00" in result.output
        assert "R$ 521,00" in result.output
        assert "R$ 1.979,00" in result.output

    def test_list_combines_filters(self, cli_runner, temp_store, sample_transactions):
        result = _invoke(
            cli_runner, temp_store, "list", "--all-dates", "--tipo", "Saida", "--status", "Aberto"
        )

        assert result.exit_code == 0, result.output
        assert "1 lançamento(s) encontrado(s)" in result.output
        assert "Loja" in result.output
        assert "edit,pay,delete,barcode" in result.output

    def test_list_search_matches_notes(self, cli_runner, temp_store, sample_transactions):
        result = _invoke(cli_runner, temp_store, "list", "--all-dates", "--search", "AMPLA")

        assert result.exit_code == 0, result.output
        assert "1 lançamento(s) encontrado(s)" in result.output
        assert "R$ 97,00" in result.output

    def test_list_empty(self, cli_runner, temp_store, sample_transactions):
        result = _invoke(cli_runner, temp_store, "list", "--start-date", "2030-01-01")

        assert result.exit_code == 0
        assert "No transactions found." in result.output

    def test_list_rejects_unknown_category(self, cli_runner, temp_store):
        result = _invoke(cli_runner, temp_store, "list", "--categoria", "Lazer")

        assert result.exit_code == 1
        assert "Invalid categoria 'Lazer'" in result.output

    def test_summary_for_date_range(self, cli_runner, temp_store, sample_transactions):
        result = _invoke(
            cli_runner, temp_store, "summary", "--start-date", "2025-09-01", "--end-date", "05/09/2025"
        )

        assert result.exit_code == 0, result.output
        assert "Período: 01/09/2025 a 05/09/2025" in result.output
        assert "Total Receitas (Filtrado): R$ 2.500,00" in result.output
        assert "R$ 97,00" in result.output
        assert "R$ 2.403,00" in result.output


class TestTransactionCommands:
    def test_show_unknown_id(self, cli_runner, temp_store):
        result = _invoke(cli_runner, temp_store, "show", "missing")

        assert result.exit_code == 1
        assert "Transaction missing not found" in result.output

    def test_show(self, cli_runner, temp_store, sample_transactions):
        target = sample_transactions[0]

        result = _invoke(cli_runner, temp_store, "show", target.id)

        assert result.exit_code == 0
        assert f"Lançamento: {target.id}" in result.output
        assert "Observação: inss Ricardo" in result.output

    def test_edit_updates_given_fields(self, cli_runner, temp_store, sample_transactions):
        target = sample_transactions[0]

        result = _invoke(cli_runner, temp_store, "edit", target.id, "--valor", "97,50", "--observacao", "")

        assert result.exit_code == 0, result.output
        assert "Lançamento Atualizado" in result.output
        assert "R$ 97,50" in result.output

        (stored,) = _by_description(temp_store, "Loja")
        assert str(stored.valor) == "97.50"
        assert stored.observacao == ""
        assert stored.categoria == target.categoria

    def test_edit_without_fields(self, cli_runner, temp_store, sample_transactions):
        result = _invoke(cli_runner, temp_store, "edit", sample_transactions[0].id)

        assert result.exit_code == 1
        assert "Nothing to update" in result.output

    def test_pay_open_transaction(self, cli_runner, temp_store, sample_transactions):
        target = sample_transactions[0]

        result = _invoke(cli_runner, temp_store, "pay", target.id)

        assert result.exit_code == 0, result.output
        assert "Status Atualizado: Lançamento marcado como fechado" in result.output
        (stored,) = _by_description(temp_store, "Loja")
        assert stored.status is Status.FECHADO

    def test_pay_refuses_closed_transaction(self, cli_runner, temp_store, sample_transactions):
        closed = sample_transactions[1]

        result = _invoke(cli_runner, temp_store, "pay", closed.id)

        assert result.exit_code == 1
        assert f"Transaction {closed.id} is already closed" in result.output

    def test_delete_with_yes(self, cli_runner, temp_store, sample_transactions):
        result = _invoke(cli_runner, temp_store, "delete", sample_transactions[0].id, "--yes")

        assert result.exit_code == 0, result.output
        assert "Lançamento Excluído" in result.output
        assert len(temp_store.list_records()) == 3

    def test_delete_cancelled(self, cli_runner, temp_store, sample_transactions):
        result = _invoke(cli_runner, temp_store, "delete", sample_transactions[0].id, input="n\n")

        assert result.exit_code == 0
        assert "Confirmar Exclusão" in result.output
        assert 'excluir o lançamento "Loja"' in result.output
        assert "Cancelled." in result.output
        assert len(temp_store.list_records()) == 4

    def test_delete_confirmed(self, cli_runner, temp_store, sample_transactions):
        result = _invoke(cli_runner, temp_store, "delete", sample_transactions[0].id, input="y\n")

        assert result.exit_code == 0, result.output
        assert _by_description(temp_store, "Loja") == []

    def test_barcode(self, cli_runner, temp_store, sample_transactions):
        target = sample_transactions[0]

        result = _invoke(cli_runner, temp_store, "barcode", target.id)

        assert result.exit_code == 0
        assert target.codigo_barras in result.output
        assert "Código copiado" in result.output

    def test_barcode_missing(self, cli_runner, temp_store, sample_transactions):
        income = sample_transactions[3]

        result = _invoke(cli_runner, temp_store, "barcode", income.id)

        assert result.exit_code == 1
        assert "Erro ao copiar" in result.output


def test_export_writes_filtered_csv(cli_runner, temp_store, sample_transactions, tmp_path):
    output = tmp_path / "fechados.csv"

    result = _invoke(
        cli_runner, temp_store, "export", "--all-dates", "--status", "Fechado", "-o", str(output)
    )

    assert result.exit_code == 0, result.output
    assert "Exportar CSV: Download iniciado com sucesso" in result.output
    assert "Exported 3 transaction(s)" in result.output

    lines = output.read_text(encoding="utf-8").split("\n")
    assert lines[0] == CSV_HEADER
    assert len(lines) == 4
    assert lines[2] == '2025-09-05,"Salário","","Receita","Receita",2500.00,"Fechado",""'


def test_unreachable_store_exits(cli_runner, tmp_path):
    url = f"sqlite:///{tmp_path / 'missing' / 'dir' / 'x.db'}"

    result = cli_runner.invoke(cli, ["--database-url", url, "list"])

    assert result.exit_code == 1
    assert "Could not open record store" in result.output


def test_database_url_from_environment(cli_runner, temp_store, sample_transactions, monkeypatch):
    monkeypatch.setenv("LANCAMENTOS_DATABASE_URL", f"sqlite:///{temp_store.database_path}")

    result = cli_runner.invoke(cli, ["summary", "--all-dates"])

    assert result.exit_code == 0, result.output
    assert "R$ 1.979,00" in result.output


def test_list_defaults_to_current_month(cli_runner, temp_store, sample_transactions, draft_factory):
    temp_store.insert(draft_factory(data_vencimento=date.today(), descricao="Mercado").to_record())

    result = _invoke(cli_runner, temp_store, "list")

    assert result.exit_code == 0, result.output
    assert "1 lançamento(s) encontrado(s)" in result.output
    assert "Mercado" in result.output
