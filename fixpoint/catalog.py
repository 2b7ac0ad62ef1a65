"""
Catalog of makers with named-recursive references.

Each ``*_maker`` is written against an explicit self parameter and is fixed
with a combinator; the function of the same base name is the conventional
definition that calls itself by name, used as the reference in checks.
"""


# ---- Factorial ----

def factorial_maker(self):
    return lambda n: 1 if n <= 1 else n * self(n - 1)


def factorial(n):
    return 1 if n <= 1 else n * factorial(n - 1)


# ---- Fibonacci ----

def fibonacci_maker(self):
    return lambda n: n if n < 2 else self(n - 1) + self(n - 2)


def fibonacci(n):
    return n if n < 2 else fibonacci(n - 1) + fibonacci(n - 2)


# ---- Greatest common divisor (two arguments) ----

def gcd_maker(self):
    return lambda a, b: a if b == 0 else self(b, a % b)


def gcd(a, b):
    return a if b == 0 else gcd(b, a % b)


# ---- Ackermann (not primitive recursive; keep inputs small) ----

def ackermann_maker(self):
    def ack(m, n):
        if m == 0:
            return n + 1
        if n == 0:
            return self(m - 1, 1)
        return self(m - 1, self(m, n - 1))
    return ack


def ackermann(m, n):
    if m == 0:
        return n + 1
    if n == 0:
        return ackermann(m - 1, 1)
    return ackermann(m - 1, ackermann(m, n - 1))


# ---- Fast exponentiation (keyword argument forwarded) ----

def power_maker(self):
    def power(base, exponent=2):
        if exponent == 0:
            return 1
        half = self(base, exponent=exponent // 2)
        return half * half * (base if exponent % 2 else 1)
    return power


def power(base, exponent=2):
    if exponent == 0:
        return 1
    half = power(base, exponent=exponent // 2)
    return half * half * (base if exponent % 2 else 1)


# ---- Even / odd (mutual recursion, fixed with mutual_fixed_point) ----

def even_maker(even, odd):
    return lambda n: True if n == 0 else odd(n - 1)


def odd_maker(even, odd):
    return lambda n: False if n == 0 else even(n - 1)


def is_even(n):
    return True if n == 0 else is_odd(n - 1)


def is_odd(n):
    return False if n == 0 else is_even(n - 1)


# ---- Never reaches a base case ----

def runaway_maker(self):
    return lambda n: self(n + 1)
