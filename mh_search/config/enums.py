# Strategy names accepted by the configuration layer

# trajectory strategies
ALG_BEST_IMPROVING  = "best_improving"
ALG_FIRST_IMPROVING = "first_improving"
ALG_STOCHASTIC      = "stochastic"
ALG_SA              = "simulated_annealing"
ALG_TABU            = "tabu_search"
ALG_RANDOM          = "random_search"
TRAJECTORY_ALGS = (
    ALG_BEST_IMPROVING,
    ALG_FIRST_IMPROVING,
    ALG_STOCHASTIC,
    ALG_SA,
    ALG_TABU,
    ALG_RANDOM,
)

# population strategies
ALG_DE = "differential_evolution"

# DE base selection
SEL_RANDOM            = "random"
SEL_BEST              = "best"
SEL_CURRENT_TO_RANDOM = "current_to_random"
SEL_CURRENT_TO_BEST   = "current_to_best"

# DE crossover
CX_NONE        = "none"
CX_BINOMIAL    = "binomial"
CX_EXPONENTIAL = "exponential"

# tabu exhaustion fallbacks
TABU_RAISE   = "raise"    # report TabuExhaustion
TABU_CURRENT = "current"  # stay on the current solution
TABU_RELAX   = "relax"    # ignore the tabu list for this step

# metrics status tags
ST_BEST    = "BEST"
ST_IMPROVE = "IMPROVE"
ST_ACCEPT  = "ACCEPT"
ST_STAY    = "STAY"
ST_EVOLVE  = "EVOLVE"
