import numpy as np


def metropolis_accept(curr_score, new_score, temp, rng):
    # exponent is the raw score difference over temperature
    if temp <= 1e-12:
        return False
    p = np.exp((curr_score - new_score) / temp)
    return p > rng.random()


def geometric_cooling(temp, rate):
    return temp * rate
