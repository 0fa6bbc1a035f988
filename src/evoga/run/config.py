import configparser
import os

from evoga.phenotype import topology_widths


class Config:

    @staticmethod
    def _parse_topology(raw_topology):
        """
        Parse the topology from a comma-separated string to a list of ints.

        Parameters:
            raw_topology: Either a comma-separated list of layer widths, or already a list

        Returns:
            List of layer widths, input layer first
        """
        if raw_topology is None:
            raise ValueError("Topology must be given as comma-separated layer widths, got None")

        if isinstance(raw_topology, str):
            try:
                raw_topology = [int(width.strip()) for width in raw_topology.split(',')]
            except ValueError:
                raise ValueError(f"Invalid topology '{raw_topology}', expected comma-separated integers")

        # raises TopologyError (a ValueError) if too short or not positive
        return topology_widths(raw_topology)

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a Config with default values.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a default Config for manual attribute setting.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.population_size = 50
            self.topology        = [2, 3, 1]
            self.gene_init_min   = -1.0
            self.gene_init_max   = +1.0

            self.selection_method = 'roulette'
            self.crossover_method = 'uniform'

            self.mutation_method      = 'uniform'
            self.mutation_probability = 0.01
            self.mutation_strength    = 0.3

            self.fitness_termination_check = False
            self.fitness_criterion         = 'max'
            self.fitness_threshold         = None
            self.max_number_generations    = 100

            self.seed = None

            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [POPULATION_INIT]

        # The number of individuals in each generation.
        # This number stays the same from one generation to the next.
        self.population_size = get_value('POPULATION_INIT', 'population_size', int)

        # The layer widths of the networks, input layer first and output
        # layer last, as a comma-separated list (at least two entries).
        # Example: "2, 4, 1" = 2 inputs, one hidden layer of 4 neurons, 1 output
        self.topology = get_value('POPULATION_INIT', 'topology', str)

        # The range of the uniform distribution used to initialize the
        # weights and biases of the networks in the first generation.
        self.gene_init_min = get_value('POPULATION_INIT', 'gene_init_min', float, default=-1.0)
        self.gene_init_max = get_value('POPULATION_INIT', 'gene_init_max', float, default=+1.0)

        # [SELECTION]

        # The method used to choose parents.
        # Allowed values:
        #   "roulette" - fitness-proportional selection
        self.selection_method = get_value('SELECTION', 'selection_method', str, default='roulette')

        # [CROSSOVER]

        # The method used to combine the chromosomes of two parents.
        # Allowed values:
        #   "uniform"      - each gene from a parent chosen by a fair coin
        #   "single_point" - genes before a random cut from one parent, the rest from the other
        self.crossover_method = get_value('CROSSOVER', 'crossover_method', str, default='uniform')

        # [MUTATION]

        # The method used to perturb the child chromosome.
        # Allowed values:
        #   "uniform"  - gene += sign * strength * uniform(0, 1)
        #   "gaussian" - gene += normal(0, strength)
        self.mutation_method = get_value('MUTATION', 'mutation_method', str, default='uniform')

        # The probability that each gene of a child chromosome is perturbed.
        self.mutation_probability = get_value('MUTATION', 'mutation_probability', float)

        # The scale of the perturbation applied to a mutated gene.
        self.mutation_strength = get_value('MUTATION', 'mutation_strength', float)

        # [TERMINATION]

        # Whether to use the fitness of the most recent
        # generation as a criterion for stopping the run.
        self.fitness_termination_check = get_value('TERMINATION', 'fitness_termination_check', bool, default=False)

        # The function used to compute the termination criterion.
        # Only applicable if 'fitness_termination_check' is 'True'.
        # Allowed values:
        #   "mean" calculate the mean fitness across the entire population
        #   "max"  get the fitness of the fittest individual in the population
        self.fitness_criterion = get_value('TERMINATION', 'fitness_criterion', str, default='max')

        # The fitness value which when met or exceeded causes the run to end.
        # Only applicable if 'fitness_termination_check' is 'True'.
        self.fitness_threshold = get_value('TERMINATION', 'fitness_threshold', float, default=None)

        # The number of generations after which to stop the run.
        # If 'fitness_termination_check' is 'True', the run may stop sooner.
        self.max_number_generations = get_value('TERMINATION', 'max_number_generations', int)

        # [RANDOM]

        # Seed of the random generator driving initialization and evolution.
        # The same seed, configuration and fitness function reproduce the same run.
        # Use "None" to seed from fresh operating system entropy.
        self.seed = get_value('RANDOM', 'seed', int, default=None)

    def __setattr__(self, name, value):
        """
        Override 'setattr' to automatically parse and validate the topology when set.
        This allows users to write config.topology = "4, 8, 2" and have it
        automatically converted to the list [4, 8, 2].
        """
        if name == 'topology':
            value = self._parse_topology(value)
        super().__setattr__(name, value)
