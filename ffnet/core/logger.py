import logging


LINE_FORMAT = '[%(asctime)s] %(levelname)-8s %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class TrainingLogger(logging.Logger):
    """ A logger for training runs that writes to standard error and,
    optionally, to a log file
    """
    def __init__(self, filename=None, stdout=True, level=logging.DEBUG):
        formatter = logging.Formatter(fmt=LINE_FORMAT, datefmt=DATE_FORMAT)

        self.file = filename
        self.stdout = stdout

        logging.Logger.__init__(self, 'ffnet training logger')
        self.setLevel(level)

        if self.file is not None:
            fhandler = logging.FileHandler(filename, mode='w')
            fhandler.setFormatter(formatter)
            self.addHandler(fhandler)

        if self.stdout:
            shandler = logging.StreamHandler()
            shandler.setFormatter(formatter)
            self.addHandler(shandler)

    def progress(self, msg, i, n):
        msg = "(%%0%dd / %d) %s" % (len(str(n)), n, msg)
        self.info(msg % i)
