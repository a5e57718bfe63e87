import os
from pathlib import Path

# Load .env file if it exists
env_file = Path(__file__).parent.parent / '.env'
if env_file.exists():
    with open(env_file) as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith('#') and '=' in line:
                key, value = line.split('=', 1)
                os.environ.setdefault(key.strip(), value.strip().strip('"\''))

# Management controller the console talks to; relative URLs are joined onto it
BMC_BASE_URL = os.environ.get('BMC_BASE_URL', 'http://127.0.0.1')

# Socket timeout applied to every GET and POST, in seconds
BMC_HTTP_TIMEOUT = float(os.environ.get('BMC_HTTP_TIMEOUT', '5'))

# Where the file-backed session store keeps the pending notification
BMC_SESSION_FILE = Path(os.environ.get('BMC_SESSION_FILE', '~/.bmcpage-session.json')).expanduser()

BMC_USER_AGENT = os.environ.get('BMC_USER_AGENT', 'bmcpage/1.0')
