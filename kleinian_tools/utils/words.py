"""Words in the generators a, b and their inverses A, B.

A capital letter always stands for the inverse of the corresponding
lower-case generator.

"""

LETTERS = ("a", "b", "A", "B")

def invert_gen(generator):
    if generator.lower() == generator:
        return generator.upper()
    return generator.lower()

def formal_inverse(word):
    return word[::-1].swapcase()

def simplify_word(word):
    """Freely reduce a word by cancelling adjacent inverse pairs."""
    reduced = []
    for letter in word:
        if reduced and reduced[-1] == invert_gen(letter):
            reduced.pop()
        else:
            reduced.append(letter)
    return "".join(reduced)

def is_reduced(word):
    return all(second != invert_gen(first)
               for first, second in zip(word, word[1:]))

def commutator(w1, w2):
    return simplify_word(w1 + w2 + formal_inverse(w1) + formal_inverse(w2))

def conjugate(word, conjugator):
    """Reduced form of conjugator * word * conjugator^-1."""
    return simplify_word(conjugator + word + formal_inverse(conjugator))
