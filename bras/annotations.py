from typing import Annotated, Optional

from pydantic import BeforeValidator, Field, PlainSerializer

from bras import functions
from bras.cpf import CPF


CPFField = Annotated[CPF, Field(description='CPF, 11 digits bare or as XXX.XXX.XXX-XX')]
CPFNumberField = Annotated[CPF, PlainSerializer(int, return_type=int)]
OptionalCPFField = Annotated[Optional[CPF], BeforeValidator(functions.empty_to_none)]
