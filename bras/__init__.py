import logging

from bras.exception import *
from bras.settings import Settings, settings
from bras.bases import AbstractDocument
from bras.cpf import CPF
from bras.annotations import CPFField, CPFNumberField, OptionalCPFField

logging.getLogger(__name__).addHandler(logging.NullHandler())
