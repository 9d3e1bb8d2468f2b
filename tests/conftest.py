import os

from xdrcodec.conf import UNITTESTS_SETTINGS_FILEPATH

os.environ['XDRCODEC_CONFIG_YAML'] = os.environ.get('XDRCODEC_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)
