"""Integration with the Bourne Again SHell."""

from .base import Setup

INIT_SCRIPT = r"""###
# Wraps {AWS_LOGIN} so that it can change the environment of this shell.
#
# Any shell code written by {AWS_LOGIN} to the file in {AWS_LOGIN_SCRIPT}
# is evaluated once the command exits.
##
{AWS_LOGIN}()
{
    local {AWS_LOGIN_SCRIPT}=

    if {AWS_LOGIN_SCRIPT}="$(mktemp)"; then
        {AWS_LOGIN_SCRIPT}="${AWS_LOGIN_SCRIPT}" {AWS_LOGIN_SHELL}={SHELL} command {AWS_LOGIN} "$@"

        local STATUS=$?

        if [ -s "${AWS_LOGIN_SCRIPT}" ]; then
            eval "$(cat "${AWS_LOGIN_SCRIPT}")"
        fi

        rm -f "${AWS_LOGIN_SCRIPT}"

        return $STATUS
    fi

    return 1
}
"""


class BashSetup(Setup):
    name = "bash"
    startup_name = ".bashrc"
    template = INIT_SCRIPT
