from msgshell.interfaces.cli.main import main

main()
