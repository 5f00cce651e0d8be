class Config:

    # =====================
    # Population
    # =====================
    seed = 1
    population_size = 3000

    # =====================
    # Network
    # =====================
    input_size = 2
    output_size = 2

    # =====================
    # Output
    # =====================
    log_path = "out/simulation.log"
    stats_path = "out/stats.csv"
