__version__ = "0.1.0"
__title__ = "dfzk"
__author__ = "Wouter Lueks, Bogdan Kulynych, Jules Fasquelle, Simon Le Bail-Collet"
__email__ = "wouter.lueks@epfl.ch"
__url__ = "https://github.com/spring-epfl/dfzk"
__license__ = "MIT"
__description__ = "Interactive proofs of knowledge of Damgard-Fujisaki commitment openings over hidden-order RSA groups."
__copyright__ = "2020, Wouter Lueks, Bogdan Kulynych (EPFL SPRING Lab)"


from dfzk.rsa_group import RSAGroup, IntPt, qr_trusted_setup
from dfzk.commitments import (
    DFParams,
    DamgardFujisakiCommitter,
    DamgardFujisakiReceiver,
    df_trusted_setup,
)
from dfzk.primitives.df_opening import (
    DFOpeningStmt,
    DFOpeningProver,
    DFOpeningVerifier,
    extract_opening,
)
