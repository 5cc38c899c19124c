from datetime import datetime, timezone
import math
import time

import hydra
from hydra.utils import instantiate
from loguru import logger
from omegaconf import DictConfig, OmegaConf

from binevo.evolution.engine import EvolutionEngine, GAConfig, GenerationStats
from binevo.fitness.base import FitnessFunction
from binevo.utils.history import save_history
from binevo.utils.logger_setup import setup_logger


def log_progress(generation: int, stats: GenerationStats) -> None:
    logger.info(
        "Generation {:>4} | best={:>12.6f} | avg={:>12.6f} | diversity={:>6.2f}% | best%={:>6.2f}",
        generation,
        stats.best_fitness,
        stats.average_fitness,
        stats.diversity * 100,
        stats.best_fitness_percentage,
    )


def run_experiment(cfg: DictConfig) -> GenerationStats:
    start_time = time.time()

    logger.info("=" * 80)
    logger.info("binevo Genetic Algorithm Run")
    logger.info("=" * 80)
    logger.info(f"Start time: {datetime.now(timezone.utc).isoformat()}")

    fitness_function: FitnessFunction = instantiate(cfg.fitness)
    ga_config = GAConfig(**OmegaConf.to_container(cfg.ga, resolve=True))
    logger.info(f"Function: {fitness_function.name} | {fitness_function.expression}")
    logger.info(
        f"Domain: [{ga_config.min_value}, {ga_config.max_value}] "
        f"| resolution: {ga_config.resolution:.3g}"
    )

    engine = EvolutionEngine(ga_config, fitness_function, seed=cfg.seed)
    try:
        final = engine.run(log_progress)
    except KeyboardInterrupt:
        logger.info("Run interrupted by user")
        raise

    best = engine.best_individual()
    logger.info("")
    logger.info(f"Best chromosome: {best}")
    logger.info(f"Best x: {final.best_value:.6f} | f(x) = {final.best_fitness:.6f}")
    optimal_x = fitness_function.optimal_x()
    if not math.isnan(optimal_x):
        logger.info(
            f"Known optimum: x = {optimal_x:.6f}, f(x) = {fitness_function.optimal_value():.6f}"
        )
    logger.info(f"Engine metrics: {engine.metrics.to_dict()}")

    if cfg.output.history_path:
        save_history(engine.statistics, cfg.output.history_path)

    duration = time.time() - start_time
    logger.info(f"Total run duration: {duration:.2f} seconds")
    logger.info("=" * 80)
    return final


@hydra.main(version_base=None, config_path="config", config_name="config")
def main(cfg: DictConfig) -> None:
    """Main entrypoint with Hydra configuration management."""
    log_file_path = setup_logger(
        log_dir=cfg.logging.log_dir,
        level=cfg.logging.level,
        rotation=cfg.logging.rotation,
        retention=cfg.logging.retention,
        run_name=cfg.logging.run_name,
        log_to_file=cfg.logging.log_to_file,
    )
    logger.info(
        "Experiment working directory: {}.",
        hydra.core.hydra_config.HydraConfig.get().runtime.output_dir,
    )
    logger.info(f"Log file: {log_file_path}")
    run_experiment(cfg)


if __name__ == "__main__":
    main()
