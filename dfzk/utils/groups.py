from petlib.bn import Bn


def get_random_num(bits):
    """
    Draw a random number of given bitlength.

    >>> x = get_random_num(6)
    >>> x < 2**6
    True
    """
    order = Bn(2).pow(bits)
    return order.random()


def get_random_int(bound):
    """
    Draw a uniformly random number from :math:`[0, bound)`.

    Backed by OpenSSL's ``BN_rand_range``, so it can be shared between sessions.

    >>> x = get_random_int(Bn(10))
    >>> 0 <= x < 10
    True
    """
    bound = ensure_bn(bound)
    if bound <= 0:
        raise ValueError("Bound must be positive, got {}".format(bound))
    return bound.random()


def ensure_bn(x):
    """
    Ensure that value is big number.

    >>> isinstance(ensure_bn(42), Bn)
    True
    >>> isinstance(ensure_bn(Bn(42)), Bn)
    True
    >>> ensure_bn(2 ** 100) == Bn(2).pow(100)
    True
    """
    if isinstance(x, Bn):
        return x
    else:
        return Bn.from_decimal(str(int(x)))
