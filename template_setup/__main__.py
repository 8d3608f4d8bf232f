from template_setup.cli import main

main()
