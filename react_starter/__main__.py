from react_starter.pipeline import main

main()
