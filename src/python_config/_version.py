__version__ = "0.1.2"
__author__ = "Ian McIntyre"
