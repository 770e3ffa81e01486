BITS_PER_WORD = 8
BITS_PER_INT = 32
ALPH_SIZE = 1 << BITS_PER_WORD
PSEUDO_EOF = ALPH_SIZE
HUFF_NUMBER = 0xface8200
HUFF_TREE = HUFF_NUMBER | 1

# A tree over ALPH_SIZE + 1 leaves is at most ALPH_SIZE levels deep
MAX_TREE_DEPTH = ALPH_SIZE + 1

DEBUG_HIGH = 4
DEBUG_LOW = 1
