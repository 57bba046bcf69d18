import numpy as np

from ffnet import Network, RandomDouble
from ffnet.core.logger import TrainingLogger
from ffnet.data import logic_gates
from ffnet.util.on_sample import collect_costs, log_progress


random_state = np.random.RandomState(1234)


# Create the training set #####################################################

n_epochs = 5000
samples = logic_gates.make_dataset(
    'xor', n_epochs=n_epochs, shuffle=True, random_state=random_state)

# Set up the network and train it #############################################

network = Network(
    layer_sizes=[2, 3, 1],
    learning_rate=0.5,
    random_double=RandomDouble(random_state=random_state),
)

logger = TrainingLogger(filename='train-log.txt')
costs = []

network.train(
    samples,
    on_sample=[
        collect_costs(costs),
        log_progress(logger, len(samples), every=2000),
    ]
)

# Report the trained truth table ##############################################

for input, target in logic_gates.make('xor'):
    output = network.predict(input)
    logger.info("{} -> {:.4f} (target {:.0f})".format(
        input, output[0], target[0]))

logger.info("Mean cost over the last epoch: {:.6f}".format(
    np.mean(costs[-4:])))
