"""
Server parameter declarations.
"""

from serverconf.config.core import NodeIdFileValidator, NotBlankMinLengthValidator, ParameterSpec

PASSWORD_SECRET = "password_secret"
NODE_ID_FILE = "node_id_file"

PASSWORD_SECRET_MIN_LENGTH = 16

SERVER_PARAMETERS = (
    ParameterSpec(
        key=PASSWORD_SECRET,
        required=True,
        validators=(NotBlankMinLengthValidator(PASSWORD_SECRET_MIN_LENGTH),),
        description="Shared secret used for signing, at least 16 characters"
    ),
    ParameterSpec(
        key=NODE_ID_FILE,
        required=False,
        validators=(NodeIdFileValidator(),),
        description="Path of the file persisting the node ID"
    ),
)
