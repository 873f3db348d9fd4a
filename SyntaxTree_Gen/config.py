from dataclasses import dataclass


@dataclass
class GeneratorConfig:
    """Where and how the generated tree is written"""
    output_file: str = "AST.txt"
    header: str = "Abstract Syntax Tree"
    encoding: str = "utf-8"
