"""
🐕 SAMOYED - Git Hooks Manager

Instala stubs de hooks apontados por core.hooksPath e, quando o Git
dispara um hook, decide qual comando (ou script) deve rodar.

Author: Vinícius Lisboa <contato@viniciuslisboa.com.br>
GitHub: @IamXeoth
"""

from .__version__ import __version__

__all__ = ["__version__"]
