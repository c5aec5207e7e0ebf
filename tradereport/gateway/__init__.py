"""tradereport.gateway — instruction ingestion and validation."""

from tradereport.gateway.loader import load_instructions as load_instructions
from tradereport.gateway.parser import INSTRUCTION_FIELDS as INSTRUCTION_FIELDS
from tradereport.gateway.parser import instruction_to_dict as instruction_to_dict
from tradereport.gateway.parser import parse_instruction as parse_instruction
from tradereport.gateway.types import Action as Action
from tradereport.gateway.types import Instruction as Instruction
