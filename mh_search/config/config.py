# Simple parameter defaults (extend freely)
DEFAULTS = {
    "algorithm": "simulated_annealing",
    "generation_limit": 1000,
    "log_period": 100,
    "sa_temp0": 10.0,
    "sa_epoch_length": 10,      # generations between two cooling steps
    "sa_cooling": 0.95,         # geometric cooling factor
    "tabu_length": 5,
    "tabu_on_exhaustion": "raise",
    "de_crossover_rate": 0.9,
    "de_current_factor": 0.5,
    "de_scaling_factor": 0.5,
    "de_diff_vectors": 1,
    "de_selection": "best",
    "de_crossover": "none",
    "de_max_retries": 1000,     # rejection-sampling budget per difference vector draw
    "de_discard_trial": False,  # evaluate the unmodified target instead of the trial vector
    "de_population_size": 20,
    "problem": "sphere",
    "dim": 5,
    "low": -5.0,
    "high": 5.0,
    "start": 10,                # start point of the integer parabola
    "neighbors": 8,             # gaussian neighbors per step for continuous problems
    "sigma": 0.5,
}
