from .pdb_atom_reader import PDBAtomReader

__all__ = ["PDBAtomReader"]
