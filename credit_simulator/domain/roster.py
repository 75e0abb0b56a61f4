"""Built-in transporter roster, available before any upload"""

from functools import lru_cache
from typing import Tuple
from credit_simulator.domain.ingestion import ingest, split_roster_text
from credit_simulator.domain.models import Counterpart

DEFAULT_ROSTER_TEXT = """\
MOYANO EDUARDO ALBERTO;20175312650;59833251,71
PICCIONI FERNANDO GABRIEL;20236590918;81334211,67
ISIDORI JUAN WALTER;20314168217;137175498,4
MARIN LUIS MIGUEL;20263693346;44095506,9796
QUEVEDO NATALIA SOLEDAD;27363724278;282280813,9
SANTORI LAUTARO MARTIN;20407520840;39274832,19
KURZ JAVIER GERMAN;20175188844;135544003,86
TRANS-CEREAL SOCIEDAD ANONIMA;30707974237;614009412,53
PEREZ CARLOS GUILLERMO;20181282976;20219171,3
TRANSPORTE LOS HERMANOS S.A.S.;30716628538;9577108,71
BARALE YANINA ELIZABETH;23243033624;9800687,13
LOGISTICA SALTO S. CAP I SECC IV;30717476278;30386663,3956
TORRES ROMINA CELESTE;23284862104;7470304,05
ECHEVARRIA JORGE LUJAN;20304162199;24457581,95
BALLEJOS RICARDO DARIO;20298108837;1286053,34
CAMINOS AL PUERTO S.R.L.;30714884421;1350162003,89
ASTUDIANO GERARDO LUIS;20237446217;9517475,22
GENTA MIGUEL;20222738823;13673827,87
ALBANO ROBERTO FABIAN;20250090081;64200185,7092
GELMINI ARIEL DAMIAN;20289217828;98715396,33
VILLALBA FRANCISCO RICARDO;20166452059;11254535,63
DULCE MARCOS DAVID;20285809550;74558630,63
TRANSPORTE DON VICTOR S.A.;33715694609;11588719,75
MAURIZIO JORGE MARIO;20260150805;59050196,15
ALMANDOZ JUAN JOSE;20323894893;107758662,05
GONZALEZ CRISTIAN HERNAN;20251734179;24189186,47
SERVETTO EMILSE SOLEDAD;27310978995;32862322,24
MUNT JORGE ALBERTO;23160529199;36746419,85
PICCIONI PABLO ANDRES;20236590187;37145608,43
AMAYA JORGE OMAR;20287341106;17376121,4024
OVIEDO JORGE ALEJANDRO;20263623844;36725201,26
AGUSTO FEDERICO MAXIMO;20371229656;29772854,65
TRANSPORTE PICCA SRL;30716414279;693749874,55
LUCARINI RAMIRO RAFAEL;20343806990;96566909,6744
REGNICOLI JONATHAN JESUS;20364792396;30373596,66
MEDINA RICARDO DAMIAN;20227645564;127352145,98
DALMASSO EDUARDO DIEGO;20160182629;2782602,36
LA  GAMA S.A.S.;30716511606;7403432,11
GAIDO BRIAN LUCIANO;20396130581;34134260,93
TALIANI DAVID EGIDIO;20244901833;44042445,15
CRETTINO ALEJANDRO JOSE;20171112991;47755131,95
DI BELLE SANTIAGO RAUL;20289822748;53897689,35
OLIVA DANIEL GUSTAVO;20250675942;28244042,72
CONRERO ROGELIO PEDRO;20076430889;23899317,56
FERREYRA JULIO BERNABE;20268709909;113073490,86
HUBELI BETINA INES;27266095665;331988621,22
CHIRINO CLAUDIO DANIEL;20266070803;86780887,77
CAFFARATTI MARIA TERESA;27308132728;23880269,6
DE JORGE DANIEL MARCELO;20221915659;3432985,6541
ALBOCAMPO  S A;30678227915;8067310,86
"""


@lru_cache(maxsize=1)
def default_roster() -> Tuple[Counterpart, ...]:
    """Counterparts parsed from DEFAULT_ROSTER_TEXT (computed once, immutable)"""
    return tuple(ingest(split_roster_text(DEFAULT_ROSTER_TEXT)))
