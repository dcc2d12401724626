"""
Shared fixtures: small exports shaped like the hospital system's surgery report.
"""
import pytest


SAMPLE_XML = """<?xml version="1.0" encoding="ISO-8859-1"?>
<R_CIRURGIAS>
  <LIST_G_DT_REALIZACAO>
    <G_DT_REALIZACAO>
      <DT_REALIZACAO>15/03/24</DT_REALIZACAO>
      <LIST_G_NM_PACIENTE>
        <G_NM_PACIENTE>
          <NM_PACIENTE>JOSÉ DA SILVA</NM_PACIENTE>
          <CD_PACIENTE>1001</CD_PACIENTE>
          <CD_AVISO_CIRURGIA>5001</CD_AVISO_CIRURGIA>
          <LIST_G_CIRURGIA>
            <G_CIRURGIA>
              <DECODE_NVL_CIR_AVI_DS_NPADRONI>COLECISTECTOMIA VIDEOLAPAROSCÓPICA</DECODE_NVL_CIR_AVI_DS_NPADRONI>
              <CF_NM_ANESTESISTA>ANA PAULA SOUZA</CF_NM_ANESTESISTA>
              <DS_TIP_ANEST>GERAL</DS_TIP_ANEST>
            </G_CIRURGIA>
            <G_CIRURGIA>
              <DECODE_NVL_CIR_AVI_DS_NPADRONI>EXERESE DE NEVO</DECODE_NVL_CIR_AVI_DS_NPADRONI>
              <CF_NM_ANESTESISTA>ANA PAULA SOUZA</CF_NM_ANESTESISTA>
              <DS_TIP_ANEST>LOCAL</DS_TIP_ANEST>
            </G_CIRURGIA>
          </LIST_G_CIRURGIA>
        </G_NM_PACIENTE>
      </LIST_G_NM_PACIENTE>
    </G_DT_REALIZACAO>
  </LIST_G_DT_REALIZACAO>
  <CS_TOTAL$>2</CS_TOTAL$>
</R_CIRURGIAS>
"""

# Two months, three patients, one LOCAL case and one surgery missing leaves.
MULTI_MONTH_XML = """<?xml version="1.0" encoding="ISO-8859-1"?>
<R_CIRURGIAS>
  <LIST_G_DT_REALIZACAO>
    <G_DT_REALIZACAO>
      <DT_REALIZACAO>28/02/24</DT_REALIZACAO>
      <LIST_G_NM_PACIENTE>
        <G_NM_PACIENTE>
          <NM_PACIENTE>MARIA OLIVEIRA</NM_PACIENTE>
          <CD_PACIENTE>2001</CD_PACIENTE>
          <CD_AVISO_CIRURGIA>6001</CD_AVISO_CIRURGIA>
          <LIST_G_CIRURGIA>
            <G_CIRURGIA>
              <DECODE_NVL_CIR_AVI_DS_NPADRONI>HERNIORRAFIA INGUINAL</DECODE_NVL_CIR_AVI_DS_NPADRONI>
              <CF_NM_ANESTESISTA>CARLOS LIMA</CF_NM_ANESTESISTA>
              <DS_TIP_ANEST>RAQUIDIANA</DS_TIP_ANEST>
            </G_CIRURGIA>
          </LIST_G_CIRURGIA>
        </G_NM_PACIENTE>
      </LIST_G_NM_PACIENTE>
    </G_DT_REALIZACAO>
    <G_DT_REALIZACAO>
      <DT_REALIZACAO>01/03/24</DT_REALIZACAO>
      <LIST_G_NM_PACIENTE>
        <G_NM_PACIENTE>
          <NM_PACIENTE>PEDRO SANTOS</NM_PACIENTE>
          <CD_PACIENTE>2002</CD_PACIENTE>
          <CD_AVISO_CIRURGIA>6002</CD_AVISO_CIRURGIA>
          <LIST_G_CIRURGIA>
            <G_CIRURGIA>
              <DECODE_NVL_CIR_AVI_DS_NPADRONI>ARTROSCOPIA DE JOELHO</DECODE_NVL_CIR_AVI_DS_NPADRONI>
              <DS_TIP_ANEST>BLOQUEIO</DS_TIP_ANEST>
            </G_CIRURGIA>
            <G_CIRURGIA>
              <DECODE_NVL_CIR_AVI_DS_NPADRONI>SUTURA</DECODE_NVL_CIR_AVI_DS_NPADRONI>
              <CF_NM_ANESTESISTA>CARLOS LIMA</CF_NM_ANESTESISTA>
              <DS_TIP_ANEST>LOCAL</DS_TIP_ANEST>
            </G_CIRURGIA>
          </LIST_G_CIRURGIA>
        </G_NM_PACIENTE>
        <G_NM_PACIENTE>
          <NM_PACIENTE>LUCIA FERREIRA</NM_PACIENTE>
          <CD_PACIENTE>2003</CD_PACIENTE>
          <CD_AVISO_CIRURGIA>6003</CD_AVISO_CIRURGIA>
          <LIST_G_CIRURGIA>
            <G_CIRURGIA>
              <DECODE_NVL_CIR_AVI_DS_NPADRONI>CESARIANA</DECODE_NVL_CIR_AVI_DS_NPADRONI>
              <CF_NM_ANESTESISTA>BEATRIZ COSTA</CF_NM_ANESTESISTA>
              <DS_TIP_ANEST>RAQUIDIANA</DS_TIP_ANEST>
            </G_CIRURGIA>
          </LIST_G_CIRURGIA>
        </G_NM_PACIENTE>
      </LIST_G_NM_PACIENTE>
    </G_DT_REALIZACAO>
    <G_DT_REALIZACAO>
      <DT_REALIZACAO>29/02/24</DT_REALIZACAO>
      <LIST_G_NM_PACIENTE>
        <G_NM_PACIENTE>
          <NM_PACIENTE>RAFAEL ALVES</NM_PACIENTE>
          <CD_PACIENTE>2004</CD_PACIENTE>
          <CD_AVISO_CIRURGIA>6004</CD_AVISO_CIRURGIA>
          <LIST_G_CIRURGIA>
            <G_CIRURGIA>
              <DECODE_NVL_CIR_AVI_DS_NPADRONI>APENDICECTOMIA</DECODE_NVL_CIR_AVI_DS_NPADRONI>
              <CF_NM_ANESTESISTA>BEATRIZ COSTA</CF_NM_ANESTESISTA>
              <DS_TIP_ANEST>GERAL</DS_TIP_ANEST>
            </G_CIRURGIA>
          </LIST_G_CIRURGIA>
        </G_NM_PACIENTE>
      </LIST_G_NM_PACIENTE>
    </G_DT_REALIZACAO>
  </LIST_G_DT_REALIZACAO>
</R_CIRURGIAS>
"""

NO_GROUPS_XML = """<?xml version="1.0" encoding="ISO-8859-1"?>
<R_CIRURGIAS>
  <LIST_G_DT_REALIZACAO/>
  <CS_TOTAL>0</CS_TOTAL>
</R_CIRURGIAS>
"""

MISSING_SURGERY_LIST_XML = """<R_CIRURGIAS>
  <G_DT_REALIZACAO>
    <DT_REALIZACAO>10/04/24</DT_REALIZACAO>
    <G_NM_PACIENTE>
      <NM_PACIENTE>SEM LISTA</NM_PACIENTE>
      <CD_AVISO_CIRURGIA>7001</CD_AVISO_CIRURGIA>
    </G_NM_PACIENTE>
  </G_DT_REALIZACAO>
</R_CIRURGIAS>
"""


@pytest.fixture
def sample_xml():
    return SAMPLE_XML


@pytest.fixture
def multi_month_xml():
    return MULTI_MONTH_XML


@pytest.fixture
def no_groups_xml():
    return NO_GROUPS_XML


@pytest.fixture
def missing_surgery_list_xml():
    return MISSING_SURGERY_LIST_XML


@pytest.fixture
def sample_bytes(sample_xml):
    """Sample export encoded as the hospital system writes it."""
    return sample_xml.encode('iso-8859-1')


@pytest.fixture
def multi_month_bytes(multi_month_xml):
    return multi_month_xml.encode('iso-8859-1')
