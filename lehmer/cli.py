import logging
import os

import click

from lehmer.analysis import (
    KNOWN_PARAMETERS,
    StatisticalAnalyzer,
    parameter_table,
    plot_distribution,
    plot_scatter_pairs,
)
from lehmer.config import make_config
from lehmer.entities import InvalidParameter, LehmerGenerator
from lehmer.hull_conditions import check_hull_conditions, find_optimal_parameters
from lehmer.report import format_hull_report, format_sequence, format_uniformity

logger = logging.getLogger(__name__)


def configure_logging(level: str):
    logging.basicConfig(format="%(asctime)s  %(levelname)s  %(message)s", datefmt="%H:%M:%S")
    logging.getLogger("lehmer").setLevel(level)


def echo_lines(lines):
    for line in lines:
        click.echo(line)


def prompt_parameters():
    """Запрашивать (a, c, m, X0), пока значения не попадут в допустимые диапазоны."""
    m = click.prompt("Модуль m", type=click.IntRange(min=1))
    a = click.prompt("Множитель a", type=click.IntRange(0, m - 1))
    c = click.prompt("Приращение c", type=click.IntRange(0, m - 1))
    seed = click.prompt("Начальное значение X0", type=click.IntRange(0, m - 1))
    return a, c, m, seed


def emit_sequence(generator: LehmerGenerator, count: int, floats: bool):
    if floats:
        values = generator.generate_float_sequence(count)
    else:
        values = generator.generate_sequence(count)
    echo_lines(format_sequence(values))


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Подробный журнал (DEBUG)")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    config = make_config()
    if verbose:
        config['log_level'] = 'DEBUG'
    configure_logging(config['log_level'])
    ctx.obj = config


@cli.command()
@click.option("--count", "-n", type=click.IntRange(min=0), default=None,
              help="Сколько чисел вывести (по умолчанию m)")
@click.option("--floats", is_flag=True, help="Выводить нормированные значения из [0, 1)")
@click.pass_obj
def run(config, count: int, floats: bool):
    """Запросить параметры до получения полного периода и вывести последовательность."""
    while True:
        a, c, m, seed = prompt_parameters()
        report = check_hull_conditions(a, c, m)
        echo_lines(format_hull_report(report, a, c, m))
        if report.all_conditions_met:
            break
        click.echo("Параметры не дают полного периода, введите их заново.\n")

    generator = LehmerGenerator(seed=seed, a=a, c=c, m=m)
    limit = count if count is not None else config.get('display_limit') or m
    click.echo(f"\nПервые {limit} чисел после X0 = {seed}:")
    emit_sequence(generator, limit, floats)


@cli.command()
@click.argument("a", type=int)
@click.argument("c", type=int)
@click.argument("m", type=click.IntRange(min=1))
@click.pass_context
def check(ctx: click.Context, a: int, c: int, m: int):
    """Проверить условия Халла-Добелла для A, C, M."""
    report = check_hull_conditions(a, c, m)
    echo_lines(format_hull_report(report, a, c, m))
    ctx.exit(0 if report.all_conditions_met else 1)


@cli.command()
@click.argument("a", type=int)
@click.argument("c", type=int)
@click.argument("m", type=int)
@click.argument("seed", type=int)
@click.option("--count", "-n", type=click.IntRange(min=0), default=None,
              help="Сколько чисел вывести (по умолчанию m)")
@click.option("--floats", is_flag=True, help="Выводить нормированные значения из [0, 1)")
@click.option("--force", is_flag=True, help="Генерировать даже без гарантии полного периода")
@click.pass_context
def generate(ctx: click.Context, a: int, c: int, m: int, seed: int, count: int, floats: bool, force: bool):
    """Сгенерировать числа для A, C, M начиная с SEED."""
    try:
        generator = LehmerGenerator(seed=seed, a=a, c=c, m=m)
    except InvalidParameter as e:
        raise click.BadParameter(str(e), param_hint=e.name.upper())

    report = generator.check_hull()
    if not report.all_conditions_met:
        echo_lines(format_hull_report(report, a, c, m))
        if not force:
            click.echo("Полный период не гарантирован, используйте --force", err=True)
            ctx.exit(1)
        logger.warning("generating without full period guarantee: %s", generator)

    limit = count if count is not None else ctx.obj.get('display_limit') or m
    emit_sequence(generator, limit, floats)


@cli.command()
@click.argument("m", type=click.IntRange(min=1))
@click.option("--limit", "-l", type=click.IntRange(min=1), default=None,
              help="Максимальное количество наборов параметров")
@click.pass_obj
def search(config, m: int, limit: int):
    """Найти пары (a, c) с полным периодом для модуля M."""
    limit = limit or config['search_limit']
    found = find_optimal_parameters(m, max_c=config['max_c'], limit=limit)
    if not found:
        click.echo(f"Для m = {m} параметры не найдены")
        return
    click.echo(f"Найдено {len(found)} наборов параметров для m = {m}:")
    for i, (a, c, _) in enumerate(found, start=1):
        click.echo(f"  #{i}: a={a}, c={c}")


@cli.command()
@click.option("--sample-size", "-s", type=click.IntRange(min=1), default=None,
              help="Объем выборки для проверки равномерности")
@click.option("--period-limit", type=click.IntRange(min=1), default=None,
              help="Граница итераций при измерении периода")
@click.option("--plot-dir", type=click.Path(file_okay=False), default=None,
              help="Каталог для гистограмм и диаграмм рассеяния")
@click.pass_obj
def analyze(config, sample_size: int, period_limit: int, plot_dir: str):
    """Сравнить известные наборы параметров: условия Халла-Добелла, период, равномерность."""
    sample_size = sample_size or config['sample_size']
    period_limit = period_limit or config['max_period_iterations']
    table = parameter_table(KNOWN_PARAMETERS, max_iterations=period_limit)
    click.echo(table.to_string(index=False))
    click.echo()

    analyzer = StatisticalAnalyzer()
    if plot_dir:
        os.makedirs(plot_dir, exist_ok=True)
    for i, params in enumerate(KNOWN_PARAMETERS, start=1):
        generator = LehmerGenerator(seed=1, a=params['a'], c=params['c'], m=params['m'])
        data = generator.generate_float_sequence(sample_size)
        result = analyzer.test_uniformity_chi2(data, n_bins=config['chi2_bins'], alpha=config['alpha'])
        click.echo(f"{params['name']}:")
        echo_lines("  " + line for line in format_uniformity(result))
        click.echo(f"  Корреляция соседних значений: {analyzer.serial_correlation(data):.4f}")
        if plot_dir:
            dpi = config['plot_dpi']
            plot_distribution(data, os.path.join(plot_dir, f"set{i}_hist.png"),
                              n_bins=config['chi2_bins'], dpi=dpi)
            plot_scatter_pairs(data, os.path.join(plot_dir, f"set{i}_pairs.png"), dpi=dpi)


if __name__ == "__main__":
    cli()
